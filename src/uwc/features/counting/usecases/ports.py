"""
Summary: Declare the byte-source and output-sink protocols the counting pipeline needs.
Why: Keep file handles and renderers swappable without the usecases importing them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Blocking reader returning ``b""`` at end of stream."""

    def read(self, size: int = -1, /) -> bytes:
        ...


@runtime_checkable
class OutputSink(Protocol):
    """Receives rendered rows one at a time."""

    def write_header(self, columns: Sequence[str]) -> None:
        ...

    def write_row(self, counts: Sequence[int], label: str | None = None) -> None:
        ...

    def close(self) -> None:
        ...


__all__ = ["ByteSource", "OutputSink"]
