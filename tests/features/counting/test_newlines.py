"""Tests for the newline table and its byte matcher."""

from __future__ import annotations

import pytest

from uwc.features.counting.domain.newlines import (
    CR,
    CRLF,
    FF,
    LF,
    LS,
    MAX_NEWLINE_BYTES,
    NEL,
    NEWLINES,
    PS,
    find_newline,
    is_newline,
)


def test_catalog_holds_the_seven_unicode_terminators() -> None:
    """All seven recommended newline sequences are recognized."""

    assert NEWLINES == {CR, LF, CRLF, NEL, FF, LS, PS}
    assert MAX_NEWLINE_BYTES == 3


@pytest.mark.parametrize(
    ("terminator", "width"),
    [(LF, 1), (CR, 1), (CRLF, 2), (NEL, 2), (FF, 1), (LS, 3), (PS, 3)],
    ids=["LF", "CR", "CRLF", "NEL", "FF", "LS", "PS"],
)
def test_find_newline_reports_byte_offsets(terminator: str, width: int) -> None:
    """Offsets are byte offsets into the UTF-8 buffer."""

    buffer = f"héllo{terminator}world".encode("utf-8")

    assert find_newline(buffer) == (6, 6 + width)


def test_find_newline_prefers_crlf_over_bare_cr() -> None:
    """CR followed by LF is one terminator, not two."""

    assert find_newline(b"a\r\nb") == (1, 3)


def test_find_newline_returns_earliest_match() -> None:
    """The first terminator wins, whatever its kind."""

    buffer = f"a{PS}b\nc".encode("utf-8")

    assert find_newline(buffer) == (1, 4)


def test_find_newline_honours_start_offset() -> None:
    assert find_newline(b"a\nb\nc", 2) == (3, 4)


def test_find_newline_without_terminator() -> None:
    assert find_newline(b"no line break here") is None
    assert find_newline(b"") is None


def test_find_newline_ignores_incomplete_multibyte_terminator() -> None:
    """A partial LS at the end of a buffer is not a match yet."""

    assert find_newline(LS.encode("utf-8")[:2]) is None


def test_find_newline_accepts_bytearray() -> None:
    assert find_newline(bytearray(b"x\x0cy")) == (1, 2)


def test_is_newline() -> None:
    assert is_newline(CRLF)
    assert is_newline(NEL)
    assert not is_newline("\n\n")
    assert not is_newline("a")
    assert not is_newline("")
