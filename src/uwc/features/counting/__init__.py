"""Counting feature: split byte streams into lines and count Unicode units."""

from .domain import CountedMap, CounterKind, count
from .usecases import (
    Aggregator,
    CountRequest,
    FileResult,
    Granularity,
    RunResult,
    SegmentSplitter,
)

__all__ = [
    "Aggregator",
    "CountRequest",
    "CountedMap",
    "CounterKind",
    "FileResult",
    "Granularity",
    "RunResult",
    "SegmentSplitter",
    "count",
]
