"""Command line interface package."""

from uwc.ui.cli.cli import (
    EXIT_FATAL,
    EXIT_INTERRUPTED,
    EXIT_PARTIAL_FAILURE,
    EXIT_SUCCESS,
    CommandProcessor,
    main,
)

__all__ = [
    "EXIT_FATAL",
    "EXIT_INTERRUPTED",
    "EXIT_PARTIAL_FAILURE",
    "EXIT_SUCCESS",
    "CommandProcessor",
    "main",
]
