"""Display management for CLI interface."""

from uwc.ui.cli.display.sinks import ElasticSink, TabSeparatedSink

__all__ = ["ElasticSink", "TabSeparatedSink"]
