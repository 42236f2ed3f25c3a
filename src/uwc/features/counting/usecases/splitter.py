"""
Summary: Split a blocking byte source into decoded text segments, one per line.
Why: Read boundaries must never split a terminator or a UTF-8 sequence.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import final, override

from uwc.config.config import BLOCK_SIZE_DEFAULT
from uwc.features.counting.domain.errors import DecodeError, SourceError
from uwc.features.counting.domain.newlines import CR, MAX_NEWLINE_BYTES, find_newline
from uwc.platform.logging import logger

from .ports import ByteSource

_CR_BYTES = CR.encode("utf-8")


@final
class SegmentSplitter(Iterator[str]):
    """Lazy iterator over the lines of a byte source.

    Each segment ends at the earliest newline sequence, which is kept or
    dropped according to ``keep_terminator`` but always consumed. Invalid
    UTF-8 raises ``DecodeError`` and read failures raise ``SourceError``;
    either one ends the iteration for good.
    """

    def __init__(
        self,
        source: ByteSource,
        keep_terminator: bool,
        *,
        block_size: int = BLOCK_SIZE_DEFAULT,
    ) -> None:
        self._source: ByteSource = source
        self._keep_terminator: bool = keep_terminator
        self._block_size: int = max(1, block_size)
        read1: Callable[[int], bytes] | None = getattr(source, "read1", None)
        self._read: Callable[[int], bytes] = read1 if callable(read1) else source.read
        self._buffer: bytearray = bytearray()
        # Offset up to which the buffer is known to hold no usable terminator.
        self._scanned: int = 0
        self._eof: bool = False
        self._keep_reading: bool = True

    @override
    def __iter__(self) -> "SegmentSplitter":
        return self

    @override
    def __next__(self) -> str:
        if not self._keep_reading:
            raise StopIteration

        while True:
            span = self._find_terminator()
            if span is not None:
                return self._emit(*span)

            if self._eof:
                self._keep_reading = False
                if not self._buffer:
                    raise StopIteration
                end = len(self._buffer)
                return self._emit(end, end)

            self._fill()

    def _find_terminator(self) -> tuple[int, int] | None:
        # Back off so a terminator straddling the previous read is still found.
        start = max(0, self._scanned - (MAX_NEWLINE_BYTES - 1))
        span = find_newline(self._buffer, start)
        if span is None:
            self._scanned = len(self._buffer)
            return None

        match_start, match_end = span
        at_end = match_end == len(self._buffer)
        if at_end and not self._eof and self._buffer[match_start:match_end] == _CR_BYTES:
            # A trailing CR may be the first half of a CRLF in the next read.
            self._scanned = len(self._buffer)
            return None
        return span

    def _fill(self) -> None:
        try:
            block = self._read(self._block_size)
        except OSError as exc:
            self._keep_reading = False
            raise SourceError(exc) from exc

        if not block:
            self._eof = True
            return
        self._buffer += block

    def _emit(self, match_start: int, match_end: int) -> str:
        cut = match_end if self._keep_terminator else match_start
        raw = bytes(self._buffer[:cut])
        del self._buffer[:match_end]
        self._scanned = 0

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            self._keep_reading = False
            logger.debug(
                "Invalid UTF-8 at byte %d of a %d byte segment", exc.start, len(raw)
            )
            raise DecodeError(raw[exc.start : exc.end], exc.start) from exc


__all__ = ["SegmentSplitter"]
