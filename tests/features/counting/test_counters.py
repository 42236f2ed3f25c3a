"""Tests for counter kinds, ``CountedMap`` and per-segment counting."""

from __future__ import annotations

import itertools

import pytest

from uwc.features.counting.domain.counters import (
    ALL_COUNTERS,
    DEFAULT_COUNTERS,
    CountedMap,
    CounterKind,
    count,
    count_kind,
    sum_counts,
)
from uwc.features.counting.domain.newlines import FF, LS, NEL, PS

GRAPHEMES = CounterKind.GRAPHEMES
BYTES = CounterKind.BYTES
WORDS = CounterKind.WORDS
CODE_POINTS = CounterKind.CODE_POINTS
LINES = CounterKind.LINES


def test_count_hello() -> None:
    counts = count(ALL_COUNTERS, "hello")

    assert counts == {GRAPHEMES: 5, BYTES: 5, WORDS: 1, CODE_POINTS: 5, LINES: 0}


def test_count_counts_lines() -> None:
    """Every terminator is one line; CRLF is a single grapheme cluster."""

    text = "foo\r\nbar\n\nbaz" + NEL + "quux" + FF + LS + "xi" + PS + "\n"

    counts = count(ALL_COUNTERS, text)

    assert counts == {
        GRAPHEMES: 23,
        LINES: 8,
        BYTES: 29,
        WORDS: 5,
        # one more than grapheme clusters because of \r\n
        CODE_POINTS: 24,
    }


def test_count_counts_words_in_greek() -> None:
    i_can_eat_glass = "Μπορῶ νὰ φάω σπασμένα γυαλιὰ χωρὶς νὰ πάθω τίποτα."

    counts = count(ALL_COUNTERS, i_can_eat_glass)

    assert counts[WORDS] == 9
    assert counts[LINES] == 0
    assert counts[BYTES] == len(i_can_eat_glass.encode("utf-8"))
    assert counts[CODE_POINTS] == len(i_can_eat_glass)


def test_precomposed_and_combining_forms_differ_only_in_code_points() -> None:
    precomposed = "\u00e9"
    combining = "e\u0301"

    assert count([CODE_POINTS], precomposed) == {CODE_POINTS: 1}
    assert count([CODE_POINTS], combining) == {CODE_POINTS: 2}
    assert count_kind(GRAPHEMES, precomposed) == 1
    assert count_kind(GRAPHEMES, combining) == 1


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("can't stop", 2),
        ("hello, world!", 2),
        ("3.14 apples", 2),
        ("  ... -- !!  ", 0),
        ("\t\n", 0),
        ("snake_case_name", 1),
        ("___", 0),
        ("_ a", 1),
        ("__init__", 1),
        ("👍🏽 ok", 1),
    ],
)
def test_word_boundaries(text: str, expected: int) -> None:
    """Whitespace, punctuation and underscore-only runs are not words."""

    assert count_kind(WORDS, text) == expected


@pytest.mark.parametrize(
    ("text", "graphemes", "code_points"),
    [
        ("\U0001f468\u200d\U0001f469\u200d\U0001f467", 1, 5),
        ("\U0001f1ef\U0001f1f5\U0001f1eb\U0001f1f7", 2, 4),
        ("\r\n", 1, 2),
        ("\n\r", 2, 2),
    ],
    ids=["zwj-family", "flags", "crlf", "lfcr"],
)
def test_grapheme_clusters(text: str, graphemes: int, code_points: int) -> None:
    assert count_kind(GRAPHEMES, text) == graphemes
    assert count_kind(CODE_POINTS, text) == code_points


def test_lines_counts_only_terminator_clusters() -> None:
    assert count_kind(LINES, "no terminator") == 0
    assert count_kind(LINES, "one\n") == 1
    assert count_kind(LINES, "\n\r") == 2
    assert count_kind(LINES, "\r\n") == 1


def test_bytes_counts_utf8_length() -> None:
    assert count_kind(BYTES, "ü") == 2
    assert count_kind(BYTES, LS) == 3
    assert count_kind(BYTES, "\U0001f600") == 4


def test_empty_string_counts_zero() -> None:
    assert count(ALL_COUNTERS, "") == CountedMap.zero(ALL_COUNTERS)


def test_no_counters_gives_empty_map() -> None:
    counts = count([], "anything at all")

    assert len(counts) == 0
    assert counts == {}


def test_only_requested_counters_are_present() -> None:
    counts = count([WORDS, BYTES], "two words")

    assert set(counts) == {WORDS, BYTES}
    assert LINES not in counts


def test_counted_map_iterates_in_canonical_order() -> None:
    counts = CountedMap({CODE_POINTS: 1, BYTES: 2, LINES: 3, GRAPHEMES: 4, WORDS: 5})

    assert list(counts) == [LINES, WORDS, BYTES, GRAPHEMES, CODE_POINTS]
    assert list(counts.values()) == [3, 5, 2, 4, 1]


def test_default_counters_and_labels() -> None:
    assert DEFAULT_COUNTERS == (LINES, WORDS, BYTES)
    assert [kind.label for kind in ALL_COUNTERS] == [
        "lines",
        "words",
        "bytes",
        "graphemes",
        "codepoints",
    ]


def test_counted_map_rejects_negative_counts() -> None:
    with pytest.raises(ValueError):
        _ = CountedMap({LINES: -1})


def test_counted_map_rejects_foreign_keys() -> None:
    with pytest.raises(TypeError):
        _ = CountedMap({"lines": 1})  # type: ignore[dict-item]


def test_counted_map_addition_is_key_wise() -> None:
    left = CountedMap({LINES: 1, WORDS: 2})
    right = CountedMap({LINES: 10, WORDS: 20})

    assert left + right == {LINES: 11, WORDS: 22}
    assert left == {LINES: 1, WORDS: 2}


def test_sum_counts_is_order_independent() -> None:
    """Any order of folding chunk totals gives the same file total."""

    segments = ["alpha beta\n", "γειά σου\r\n", "e\u0301\u2028", "", "last"]
    per_segment = [count(ALL_COUNTERS, segment) for segment in segments]
    direct = count(ALL_COUNTERS, "".join(segments))

    for ordering in itertools.permutations(per_segment):
        assert sum_counts(ordering, ALL_COUNTERS) == direct


def test_sum_counts_over_any_chunk_partition() -> None:
    segments = [f"line {index} has words\n" for index in range(12)]
    expected = sum_counts((count(ALL_COUNTERS, s) for s in segments), ALL_COUNTERS)

    for chunk_size in (1, 2, 5, 12, 20):
        chunks = [segments[i : i + chunk_size] for i in range(0, len(segments), chunk_size)]
        chunk_totals = [
            sum_counts((count(ALL_COUNTERS, s) for s in chunk), ALL_COUNTERS) for chunk in chunks
        ]
        assert sum_counts(reversed(chunk_totals), ALL_COUNTERS) == expected


def test_folding_never_decreases_counts() -> None:
    running = CountedMap.zero(ALL_COUNTERS)
    for segment in ["a\n", "", "bb cc\n", "\n", "ddd"]:
        folded = running + count(ALL_COUNTERS, segment)
        assert all(folded[kind] >= running[kind] for kind in ALL_COUNTERS)
        running = folded


def test_sum_counts_of_nothing_is_zero() -> None:
    assert sum_counts([], [LINES, WORDS]) == {LINES: 0, WORDS: 0}
