"""Wrapping byte calculator with sequential, lock-based and channel-based runners."""

__version__ = "0.1.0"
