"""Command execution package for CLI."""

from uwc.ui.cli.commands.count import CountCommand

__all__ = ["CountCommand"]
