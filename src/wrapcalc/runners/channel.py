"""Concurrent runner where producers send operations to a single owner."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Iterator

from wrapcalc.accumulator import WrappingAccumulator
from wrapcalc.failures import FailureKind, FailureLog, ProcessingFailure
from wrapcalc.runners.base import (
    BaseRunner,
    ParsedOperation,
    RunStrategy,
    apply_parsed,
    iter_file_operations,
    start_worker,
)
from wrapcalc.sources import FileTask

logger = logging.getLogger(__name__)

_CLOSED = object()


class OperationChannel:
    """Multiple-producer single-consumer FIFO with an explicit close.

    ``capacity=0`` means unbounded; otherwise :meth:`send` blocks while the
    channel is full. Each producer's sends are received in sending order.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("Channel capacity must be >= 0.")
        self._queue: queue.Queue[object] = queue.Queue(maxsize=capacity)
        self._closed = threading.Event()

    def send(self, parsed: ParsedOperation) -> None:
        if self._closed.is_set():
            raise RuntimeError("send on closed channel")
        self._queue.put(parsed)

    def close(self) -> None:
        """Mark the end of the stream; call only once every producer has been joined."""

        if self._closed.is_set():
            return
        self._closed.set()
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[ParsedOperation]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                return
            yield item


class ChannelRunner(BaseRunner):
    """One producer thread per file plus one consumer owning the accumulator."""

    strategy = RunStrategy.CHANNEL

    def __init__(self, *, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("Channel capacity must be >= 0.")
        self.capacity = capacity

    def _execute(
        self,
        tasks: list[FileTask],
        accumulator: WrappingAccumulator,
        failures: FailureLog,
    ) -> int:
        channel = OperationChannel(self.capacity)
        applied = 0

        def _consume() -> None:
            nonlocal applied
            parsed: ParsedOperation | None = None
            try:
                for parsed in channel:
                    if apply_parsed(accumulator, parsed, failures):
                        applied += 1
            except Exception as exc:
                logger.exception("Channel consumer crashed")
                failures.record(
                    ProcessingFailure(
                        kind=FailureKind.WORKER_CRASHED,
                        path=parsed.path if parsed is not None else None,
                        line_number=parsed.line_number if parsed is not None else None,
                        message=f"{type(exc).__name__}: {exc}",
                    ),
                )
                # keep draining so bounded producers never block forever
                for _ in channel:
                    pass
            logger.debug("Channel drained, consumer exiting")

        consumer = threading.Thread(target=_consume, name="wrapcalc-channel-consumer", daemon=True)
        consumer.start()

        def _produce(task: FileTask) -> None:
            for parsed in iter_file_operations(task, failures):
                channel.send(parsed)

        producers = [
            start_worker(
                f"wrapcalc-channel-{task.position}",
                task,
                failures,
                lambda task=task: _produce(task),
            )
            for task in tasks
        ]
        try:
            for producer in producers:
                producer.join()
        finally:
            channel.close()
        consumer.join()
        return applied
