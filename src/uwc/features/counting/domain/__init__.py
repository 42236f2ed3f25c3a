"""
Summary: Domain exports for the counting feature.
Why: Keep newline, counter, and error definitions behind one import path.
"""

from .counters import (
    ALL_COUNTERS,
    DEFAULT_COUNTERS,
    CountedMap,
    CounterKind,
    count,
    count_kind,
    sum_counts,
)
from .errors import (
    DecodeError,
    FatalError,
    OpenError,
    SinkError,
    SourceError,
    UnitError,
    UwcError,
)
from .newlines import NEWLINES, find_newline, is_newline

__all__ = [
    "ALL_COUNTERS",
    "DEFAULT_COUNTERS",
    "NEWLINES",
    "CountedMap",
    "CounterKind",
    "DecodeError",
    "FatalError",
    "OpenError",
    "SinkError",
    "SourceError",
    "UnitError",
    "UwcError",
    "count",
    "count_kind",
    "find_newline",
    "is_newline",
    "sum_counts",
]
