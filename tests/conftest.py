"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

WriteOps = Callable[[str, Sequence[str]], Path]


@pytest.fixture()
def write_ops(tmp_path: Path) -> WriteOps:
    """Write one operation file per call and return its path."""

    def _write(name: str, lines: Sequence[str]) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), "utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _clean_wrapcalc_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "WRAPCALC_STRATEGY",
        "WRAPCALC_CHANNEL_CAPACITY",
        "WRAPCALC_BENCHMARK_REPEAT",
        "WRAPCALC_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
