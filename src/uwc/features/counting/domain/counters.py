"""
Summary: Define counter kinds, the ordered count mapping, and per-segment counting.
Why: Keep every Unicode-sensitive rule behind one pure function per segment.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import IntEnum
from typing import Final, assert_never, final

import regex

from .newlines import is_newline


class CounterKind(IntEnum):
    """Things that can be counted in a segment, in canonical display order."""

    LINES = 1
    WORDS = 2
    BYTES = 3
    GRAPHEMES = 4
    CODE_POINTS = 5

    @property
    def label(self) -> str:
        """Column header used when rendering counts."""

        return _LABELS[self]


_LABELS: Final[dict[CounterKind, str]] = {
    CounterKind.LINES: "lines",
    CounterKind.WORDS: "words",
    CounterKind.BYTES: "bytes",
    CounterKind.GRAPHEMES: "graphemes",
    CounterKind.CODE_POINTS: "codepoints",
}

ALL_COUNTERS: Final[tuple[CounterKind, ...]] = tuple(CounterKind)
DEFAULT_COUNTERS: Final[tuple[CounterKind, ...]] = (
    CounterKind.LINES,
    CounterKind.WORDS,
    CounterKind.BYTES,
)

_GRAPHEME_PATTERN: Final[regex.Pattern[str]] = regex.compile(r"\X")
# WORD switches \b to Unicode default word boundaries. Segments made only of
# connector punctuation such as "_" still match and are filtered by _is_word.
_WORD_PATTERN: Final[regex.Pattern[str]] = regex.compile(r"\b\w.*?\b", regex.WORD | regex.DOTALL)


@final
class CountedMap(Mapping[CounterKind, int]):
    """Counts keyed by ``CounterKind``, always iterated in canonical order."""

    __slots__ = ("_counts",)

    def __init__(
        self,
        counts: Mapping[CounterKind, int] | Iterable[tuple[CounterKind, int]] = (),
    ) -> None:
        items = dict(counts)
        for kind, value in items.items():
            if not isinstance(kind, CounterKind):
                raise TypeError(f"Not a counter kind: {kind!r}")
            if value < 0:
                raise ValueError(f"Negative count for {kind.label}: {value}")
        self._counts: dict[CounterKind, int] = {kind: items[kind] for kind in sorted(items)}

    @classmethod
    def zero(cls, kinds: Iterable[CounterKind]) -> "CountedMap":
        """Return a map with every requested kind set to zero."""

        return cls((kind, 0) for kind in kinds)

    def __getitem__(self, kind: CounterKind) -> int:
        return self._counts[kind]

    def __iter__(self) -> Iterator[CounterKind]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __add__(self, other: Mapping[CounterKind, int]) -> "CountedMap":
        merged = dict(self._counts)
        for kind, value in other.items():
            merged[kind] = merged.get(kind, 0) + value
        return CountedMap(merged)

    def __repr__(self) -> str:
        body = ", ".join(f"{kind.label}={value}" for kind, value in self._counts.items())
        return f"CountedMap({body})"


def _is_word(candidate: str) -> bool:
    return any(char.isalnum() for char in candidate)


def count_kind(kind: CounterKind, segment: str) -> int:
    """Count one kind of unit in ``segment``."""

    match kind:
        case CounterKind.BYTES:
            return len(segment.encode("utf-8"))
        case CounterKind.CODE_POINTS:
            return len(segment)
        case CounterKind.GRAPHEMES:
            return sum(1 for _ in _GRAPHEME_PATTERN.finditer(segment, concurrent=True))
        case CounterKind.WORDS:
            return sum(
                1
                for match in _WORD_PATTERN.finditer(segment, concurrent=True)
                if _is_word(match.group())
            )
        case CounterKind.LINES:
            return sum(
                1
                for cluster in _GRAPHEME_PATTERN.finditer(segment, concurrent=True)
                if is_newline(cluster.group())
            )
        case _:
            assert_never(kind)


def count(kinds: Iterable[CounterKind], segment: str) -> CountedMap:
    """Count every requested kind in ``segment``.

    Args:
        kinds: Requested counters. Duplicates collapse to one key.
        segment: Text to count.

    Returns:
        CountedMap: Exactly the requested keys; empty when none are requested.
    """
    return CountedMap((kind, count_kind(kind, segment)) for kind in kinds)


def sum_counts(
    maps: Iterable[Mapping[CounterKind, int]],
    kinds: Iterable[CounterKind] = (),
) -> CountedMap:
    """Sum counts key-wise, starting from zeros for ``kinds``."""

    total = CountedMap.zero(kinds)
    for counts in maps:
        total = total + counts
    return total


__all__ = [
    "ALL_COUNTERS",
    "DEFAULT_COUNTERS",
    "CountedMap",
    "CounterKind",
    "count",
    "count_kind",
    "sum_counts",
]
