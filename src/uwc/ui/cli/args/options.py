"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from uwc.features.counting import CounterKind, Granularity


@final
@dataclass(slots=True)
class CountArgs:
    """Command line arguments for a counting run."""

    files: list[str]
    counters: tuple[CounterKind, ...]
    mode: Granularity
    count_newlines: bool
    chunk_size: int
    block_size: int
    jobs: int | None
    elastic: bool
    verbose: bool
    quiet: bool
    log_file: Path | None = None


__all__ = ["CountArgs"]
