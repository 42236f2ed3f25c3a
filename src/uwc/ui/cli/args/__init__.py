"""Command line argument handling package."""

from uwc.ui.cli.args.options import CountArgs
from uwc.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CountArgs"]
