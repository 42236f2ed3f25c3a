"""
Summary: Expose the counting pipeline entry points.
Why: Keep callers stable while helpers live in dedicated submodules.
"""

from .aggregator import Aggregator
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

__all__ = [
    "Aggregator",
    "ByteSource",
    "CountRequest",
    "CountingEvent",
    "FileResult",
    "FileState",
    "Granularity",
    "OutputSink",
    "RunResult",
    "STDIN_IDENTIFIER",
    "SegmentSplitter",
    "SynchronizedSink",
    "TOTAL_LABEL",
]
