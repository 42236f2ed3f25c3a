"""src/uwc/features/counting/usecases/counting_types.py
Where: Counting feature usecases layer.
What: Shared enums and dataclasses for the counting run.
Why: Keep the aggregator lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Final

from uwc.config.config import BLOCK_SIZE_DEFAULT, CHUNK_SIZE_DEFAULT
from uwc.features.counting.domain.counters import CountedMap, CounterKind
from uwc.features.counting.domain.errors import UnitError

STDIN_IDENTIFIER: Final[str] = "-"
TOTAL_LABEL: Final[str] = "total"


class CountingEvent(StrEnum):
    """Structured event identifiers for counting logs."""

    RUN_START = "counting.run.start"
    RUN_COMPLETE = "counting.run.complete"
    RUN_ABORT = "counting.run.abort"
    FILE_START = "counting.file.start"
    FILE_COMPLETE = "counting.file.complete"
    FILE_ERROR = "counting.file.error"
    CHUNK_COMPLETE = "counting.chunk.complete"


class Granularity(StrEnum):
    """How finely count rows are reported."""

    FILE = "file"
    LINE = "line"

    @staticmethod
    def from_user_input(value: str) -> "Granularity":
        """Translate raw CLI input into the matching granularity."""

        normalized = value.strip().lower()
        for granularity in Granularity:
            if granularity.value == normalized:
                return granularity
        valid = ", ".join(g.value for g in Granularity)
        msg = f"Unsupported mode '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True, frozen=True)
class CountRequest:
    """Inputs required to run a count."""

    counters: tuple[CounterKind, ...]
    granularity: Granularity = Granularity.FILE
    count_newlines: bool = False
    chunk_size: int = CHUNK_SIZE_DEFAULT
    block_size: int = BLOCK_SIZE_DEFAULT
    jobs: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "counters", tuple(sorted(set(self.counters))))
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive; received {self.chunk_size}")
        if self.block_size <= 0:
            raise ValueError(f"block_size must be positive; received {self.block_size}")
        if self.jobs is not None and self.jobs <= 0:
            raise ValueError(f"jobs must be positive; received {self.jobs}")

    @property
    def keep_terminator(self) -> bool:
        """Whether segments retain their newline sequence."""

        if self.granularity is Granularity.FILE:
            return True
        return self.count_newlines

    @property
    def header(self) -> list[str]:
        """Column titles matching the rows this request produces."""

        return [kind.label for kind in self.counters] + ["filename"]


@dataclass(slots=True)
class FileState:
    """Per-file accumulator owned by the task counting that file."""

    name: str
    counts: CountedMap
    lines_read: int = 0
    error: UnitError | None = None
    failed_line: int | None = None
    start_time: float = field(default_factory=time.perf_counter)

    def fold(self, chunk_counts: CountedMap, lines: int) -> None:
        """Add a chunk's summed counts into the file total."""

        self.counts = self.counts + chunk_counts
        self.lines_read += lines

    def record_failure(self, error: UnitError) -> None:
        """Remember the error that stopped reading, and the line it hit."""

        self.error = error
        self.failed_line = self.lines_read + 1

    def duration_seconds(self) -> float:
        """Return the elapsed counting time in seconds."""

        return time.perf_counter() - self.start_time

    def to_result(self) -> "FileResult":
        return FileResult(
            name=self.name,
            counts=self.counts,
            lines_read=self.lines_read,
            error_message=str(self.error) if self.error is not None else None,
            failed_line=self.failed_line,
        )

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "source": self.name,
            "lines_read": self.lines_read,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


@dataclass(slots=True, frozen=True)
class FileResult:
    """Outcome of counting one input."""

    name: str
    counts: CountedMap
    lines_read: int
    error_message: str | None = None
    failed_line: int | None = None

    @property
    def success(self) -> bool:
        return self.error_message is None


@dataclass(slots=True, frozen=True)
class RunResult:
    """Outcome of one invocation across all inputs."""

    files: list[FileResult]
    total: CountedMap

    @property
    def success(self) -> bool:
        """True only when every input was read to the end without error."""

        return all(result.success for result in self.files)


__all__ = [
    "STDIN_IDENTIFIER",
    "TOTAL_LABEL",
    "CountRequest",
    "CountingEvent",
    "FileResult",
    "FileState",
    "Granularity",
    "RunResult",
]
