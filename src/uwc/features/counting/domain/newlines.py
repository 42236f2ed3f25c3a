"""
Summary: Catalog the Unicode newline sequences and their combined byte matcher.
Why: Give the splitter and the line counter one shared definition of a terminator.
"""

from __future__ import annotations

import re
from typing import Final

# http://www.unicode.org/standard/reports/tr13/tr13-5.html
LF: Final[str] = "\n"
CR: Final[str] = "\r"
CRLF: Final[str] = "\r\n"
NEL: Final[str] = "\u0085"
FF: Final[str] = "\u000c"
LS: Final[str] = "\u2028"
PS: Final[str] = "\u2029"

NEWLINES: Final[frozenset[str]] = frozenset({CR, LF, CRLF, NEL, FF, LS, PS})

NEWLINE_BYTES: Final[frozenset[bytes]] = frozenset(seq.encode("utf-8") for seq in NEWLINES)

MAX_NEWLINE_BYTES: Final[int] = max(len(seq) for seq in NEWLINE_BYTES)

# Longest first so CRLF wins over a bare CR starting at the same offset.
_NEWLINE_PATTERN: Final[re.Pattern[bytes]] = re.compile(
    b"|".join(re.escape(seq) for seq in sorted(NEWLINE_BYTES, key=len, reverse=True))
)


def find_newline(buffer: bytes | bytearray | memoryview, start: int = 0) -> tuple[int, int] | None:
    """Locate the earliest newline sequence in ``buffer``.

    Args:
        buffer: UTF-8 bytes to search.
        start: Offset to begin searching from.

    Returns:
        ``(start, end)`` offsets of the match, or ``None`` when the buffer
        holds no complete terminator.
    """
    match = _NEWLINE_PATTERN.search(buffer, start)
    if match is None:
        return None
    return match.span()


def is_newline(text: str) -> bool:
    """Return whether ``text`` is exactly one recognized newline sequence."""

    return text in NEWLINES


__all__ = [
    "CR",
    "CRLF",
    "FF",
    "LF",
    "LS",
    "MAX_NEWLINE_BYTES",
    "NEL",
    "NEWLINES",
    "NEWLINE_BYTES",
    "PS",
    "find_newline",
    "is_newline",
]
