"""Input files as per-worker line streams."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from wrapcalc.errors import FileOpenError, LineReadError


@dataclass(frozen=True, slots=True)
class FileTask:
    """One input file, owned by exactly one worker for the duration of a run."""

    path: Path
    position: int

    @property
    def name(self) -> str:
        return str(self.path)

    def iter_lines(self) -> Iterator[tuple[int, str]]:
        """Yield ``(line_number, text)`` pairs, 1-based, without line endings.

        Raises :class:`FileOpenError` if the file cannot be opened and
        :class:`LineReadError` if reading or UTF-8 decoding fails midway;
        lines yielded before the failure stay valid.
        """

        try:
            handle = self.path.open("rb")
        except OSError as exc:
            raise FileOpenError(self.path, exc.strerror or str(exc)) from exc

        line_number = 0
        with handle:
            while True:
                try:
                    raw = handle.readline()
                except OSError as exc:
                    raise LineReadError(self.path, line_number + 1, str(exc)) from exc
                if not raw:
                    return
                line_number += 1
                # decoded per line so earlier lines survive a bad byte later on
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as exc:
                    raise LineReadError(self.path, line_number, str(exc)) from exc
                yield line_number, line.rstrip("\r\n")


def build_tasks(paths: Sequence[Path | str]) -> list[FileTask]:
    return [FileTask(path=Path(path), position=index) for index, path in enumerate(paths)]
