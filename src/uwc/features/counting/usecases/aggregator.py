"""src/uwc/features/counting/usecases/aggregator.py
What: Drive splitting and counting across inputs, in parallel, and emit count rows.
Why: Own the fork-join scheduling so per-file and grand totals stay exact.
"""

from __future__ import annotations

import logging
import math
import os
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from contextlib import AbstractContextManager
from functools import partial
from typing import final

from uwc.features.counting.domain.counters import CountedMap, CounterKind, count, sum_counts
from uwc.features.counting.domain.errors import UnitError
from uwc.platform.logging import logger

from ..adapters.filesystem import open_source
from .counting_types import (
    STDIN_IDENTIFIER,
    TOTAL_LABEL,
    CountingEvent,
    CountRequest,
    FileResult,
    FileState,
    Granularity,
    RunResult,
)
from .output import SynchronizedSink
from .ports import ByteSource, OutputSink
from .splitter import SegmentSplitter

SourceOpener = Callable[[str], AbstractContextManager[ByteSource]]


@final
class Aggregator:
    """Count every requested input and write rows to the sink.

    Inputs are counted concurrently on a file pool. Inside one input, lines
    are read sequentially into chunks of ``chunk_size``; each chunk is then
    counted on a separate counting pool and summed. Rows of one chunk are
    written in line order once the whole chunk has been counted.
    """

    def __init__(
        self,
        request: CountRequest,
        sink: OutputSink,
        *,
        opener: SourceOpener = open_source,
    ) -> None:
        self.request: CountRequest = request
        self._sink: SynchronizedSink = (
            sink if isinstance(sink, SynchronizedSink) else SynchronizedSink(sink)
        )
        self._opener: SourceOpener = opener
        self._fanout: int = request.jobs or os.cpu_count() or 1
        self._abort: threading.Event = threading.Event()
        self._counting_pool: ThreadPoolExecutor | None = None

    def log_counting(
        self,
        level: int,
        event: CountingEvent,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        """Log a structured counting event."""

        logger.log(level, message, *message_args, extra={"counting_event": event, **context})

    def run(self, names: Sequence[str]) -> RunResult:
        """Count all ``names`` (stdin when empty) and write every row.

        Returns:
            RunResult: Per-file results in the order given, plus the grand total.

        Raises:
            FatalError: If an input cannot be opened or the sink fails; the
                remaining work is abandoned.
        """
        inputs = list(names) or [STDIN_IDENTIFIER]
        self._abort.clear()
        self.log_counting(
            logging.DEBUG,
            CountingEvent.RUN_START,
            "Counting started",
            files=len(inputs),
        )

        self._sink.write_header(self.request.header)

        with ThreadPoolExecutor(
            max_workers=self.request.jobs, thread_name_prefix="uwc-count"
        ) as counting_pool:
            self._counting_pool = counting_pool
            try:
                with ThreadPoolExecutor(
                    max_workers=min(self._fanout, len(inputs)),
                    thread_name_prefix="uwc-file",
                ) as file_pool:
                    futures = [file_pool.submit(self.count_file, name) for name in inputs]
                    results = self._collect(futures)
            finally:
                self._counting_pool = None

        total = sum_counts((result.counts for result in results), self.request.counters)
        if self.request.granularity is Granularity.FILE and len(results) > 1:
            self._sink.write_row(list(total.values()), TOTAL_LABEL)

        failed = sum(1 for result in results if not result.success)
        self.log_counting(
            logging.INFO if failed == 0 else logging.WARNING,
            CountingEvent.RUN_COMPLETE,
            "Counting complete" if failed == 0 else "Counting completed with errors",
            files=len(results),
            failed=failed,
        )
        return RunResult(files=results, total=total)

    def count_file(self, name: str) -> FileResult:
        """Open ``name`` and count it; open failures propagate as fatal."""

        with self._opener(name) as source:
            return self.count_source(name, source)

    def count_source(self, name: str, source: ByteSource) -> FileResult:
        """Count one already-open source and write its rows.

        Decode and read errors stop this source only: the lines read before
        the failure are still counted and reported.
        """
        state = FileState(name=name, counts=CountedMap.zero(self.request.counters))
        self.log_counting(logging.DEBUG, CountingEvent.FILE_START, "Counting", source=name)

        splitter = SegmentSplitter(
            source,
            self.request.keep_terminator,
            block_size=self.request.block_size,
        )

        while not self._abort.is_set():
            segments, error = self._read_chunk(splitter)
            if segments:
                self._count_chunk(state, segments)

            if error is not None:
                state.record_failure(error)
                self.log_counting(
                    logging.ERROR,
                    CountingEvent.FILE_ERROR,
                    "%s",
                    error,
                    source=name,
                    line=state.failed_line,
                )
                break

            if len(segments) < self.request.chunk_size:
                break

        if self._abort.is_set():
            return state.to_result()

        self._sink.write_row(list(state.counts.values()), name)
        self.log_counting(
            logging.DEBUG,
            CountingEvent.FILE_COMPLETE,
            "Counted",
            **state.summary_extra(),
        )
        return state.to_result()

    def _read_chunk(self, splitter: SegmentSplitter) -> tuple[list[str], UnitError | None]:
        segments: list[str] = []
        try:
            for segment in splitter:
                segments.append(segment)
                if len(segments) >= self.request.chunk_size:
                    break
        except UnitError as exc:
            return segments, exc
        return segments, None

    def _count_chunk(self, state: FileState, segments: list[str]) -> None:
        per_line = self._count_segments(segments)
        chunk_total = sum_counts(per_line, self.request.counters)

        if self.request.granularity is Granularity.LINE:
            first_line = state.lines_read + 1
            self._sink.write_rows(
                (list(counts.values()), f"{state.name}:{first_line + offset}")
                for offset, counts in enumerate(per_line)
            )

        state.fold(chunk_total, len(segments))
        self.log_counting(
            logging.DEBUG,
            CountingEvent.CHUNK_COMPLETE,
            "Chunk counted",
            source=state.name,
            lines_read=state.lines_read,
        )

    def _count_segments(self, segments: list[str]) -> list[CountedMap]:
        """Count segments in parallel, returning results in input order."""

        counter = partial(_count_batch, self.request.counters)
        pool = self._counting_pool
        if pool is None or len(segments) < 2 or self._fanout < 2:
            return counter(segments)

        batch_size = math.ceil(len(segments) / self._fanout)
        batches = [
            segments[start : start + batch_size] for start in range(0, len(segments), batch_size)
        ]
        per_line: list[CountedMap] = []
        for counted in pool.map(counter, batches):
            per_line.extend(counted)
        return per_line

    def _collect(self, futures: list[Future[FileResult]]) -> list[FileResult]:
        """Wait for every file task, aborting the run on the first failure.

        Results are returned in submission order once all tasks succeed.
        """
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        for future in futures:
            if future not in done:
                continue
            exc = future.exception()
            if exc is None:
                continue
            self._abort.set()
            for pending in futures:
                _ = pending.cancel()
            self.log_counting(
                logging.DEBUG,
                CountingEvent.RUN_ABORT,
                "Aborting run: %s",
                exc,
            )
            raise exc
        return [future.result() for future in futures]


def _count_batch(counters: Sequence[CounterKind], segments: Sequence[str]) -> list[CountedMap]:
    return [count(counters, segment) for segment in segments]


__all__ = ["Aggregator", "SourceOpener"]
