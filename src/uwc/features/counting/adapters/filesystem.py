"""
Summary: Open named inputs, or standard input for "-", as binary byte sources.
Why: Keep file handle lifetime and open failures outside of the aggregation usecase.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager

from uwc.features.counting.domain.errors import OpenError
from uwc.platform.logging import logger

from ..usecases.counting_types import STDIN_IDENTIFIER
from ..usecases.ports import ByteSource


@contextmanager
def open_source(name: str) -> Iterator[ByteSource]:
    """Yield a binary reader for ``name``.

    Standard input is yielded as-is and left open; regular files are closed
    when the context exits.

    Raises:
        OpenError: If the file cannot be opened.
    """
    if name == STDIN_IDENTIFIER:
        yield sys.stdin.buffer
        return

    try:
        handle = open(name, "rb")
    except OSError as exc:
        raise OpenError(name, exc) from exc

    logger.debug("Opened %s", name)
    with handle:
        yield handle


__all__ = ["open_source"]
