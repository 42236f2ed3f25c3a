"""src/uwc/features/counting/usecases/output.py
What: Serialize writes from concurrent counting tasks onto one output sink.
Why: The sink is the only resource shared between file tasks.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import final

from uwc.features.counting.domain.errors import SinkError

from .ports import OutputSink

Row = tuple[Sequence[int], str | None]


@final
class SynchronizedSink:
    """Lock-guarded wrapper that turns write failures into ``SinkError``."""

    def __init__(self, sink: OutputSink) -> None:
        self._sink: OutputSink = sink
        self._lock: threading.Lock = threading.Lock()

    @contextmanager
    def _locked(self) -> Iterator[OutputSink]:
        with self._lock:
            try:
                yield self._sink
            except OSError as exc:
                raise SinkError(exc) from exc

    def write_header(self, columns: Sequence[str]) -> None:
        with self._locked() as sink:
            sink.write_header(columns)

    def write_row(self, counts: Sequence[int], label: str | None = None) -> None:
        with self._locked() as sink:
            sink.write_row(counts, label)

    def write_rows(self, rows: Iterable[Row]) -> None:
        """Write several rows without letting other tasks interleave."""

        with self._locked() as sink:
            for counts, label in rows:
                sink.write_row(counts, label)

    def close(self) -> None:
        with self._locked() as sink:
            sink.close()


__all__ = ["Row", "SynchronizedSink"]
