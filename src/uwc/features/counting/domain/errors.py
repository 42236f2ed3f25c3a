"""src/uwc/features/counting/domain/errors.py
What: Exception hierarchy for counting runs.
Why: Let the aggregator tell run-aborting failures from per-file ones by type.
"""

from __future__ import annotations


class UwcError(RuntimeError):
    """Base class for every error raised by the counting pipeline."""


class FatalError(UwcError):
    """An error that aborts the whole run."""


class UnitError(UwcError):
    """An error confined to one input; the run continues without it."""


class OpenError(FatalError):
    """Raised when a named input cannot be opened."""

    def __init__(self, name: str, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot open {name}: {reason}")
        self.name: str = name
        self.cause: OSError = cause


class SinkError(FatalError):
    """Raised when a row cannot be written to the output."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(f"failed writing output: {cause}")
        self.cause: OSError = cause


class SourceError(UnitError):
    """Raised when reading from an input fails mid-stream."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(f"io error occurred: {cause}")
        self.cause: OSError = cause


class DecodeError(UnitError):
    """Raised when buffered input is not valid UTF-8."""

    def __init__(self, offending_bytes: bytes, valid_prefix_length: int) -> None:
        super().__init__(
            f"read non-utf8 bytes {offending_bytes!r} after {valid_prefix_length} valid bytes"
        )
        self.offending_bytes: bytes = offending_bytes
        self.valid_prefix_length: int = valid_prefix_length


__all__ = [
    "DecodeError",
    "FatalError",
    "OpenError",
    "SinkError",
    "SourceError",
    "UnitError",
    "UwcError",
]
