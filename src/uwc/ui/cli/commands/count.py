"""src/uwc/ui/cli/commands/count.py
What: Wire parsed CLI options into a counting run and its output sink.
Why: Keep argument handling and rendering choices out of the aggregator.
"""

from __future__ import annotations

from typing import final

from uwc.features.counting import Aggregator, CountRequest, RunResult
from uwc.features.counting.domain import SinkError
from uwc.features.counting.usecases import OutputSink, SynchronizedSink
from uwc.platform.logging import logger
from uwc.ui.cli.args.options import CountArgs
from uwc.ui.cli.display.sinks import ElasticSink, TabSeparatedSink


@final
class CountCommand:
    """Command for counting the requested inputs."""

    args: CountArgs
    request: CountRequest
    sink: SynchronizedSink
    aggregator: Aggregator

    def __init__(self, args: CountArgs, sink: OutputSink | None = None) -> None:
        """Initialize the command.

        Args:
            args: Command line arguments.
            sink: Output sink override; defaults to one chosen by ``args.elastic``.
        """
        self.args = args
        self.request = CountRequest(
            counters=args.counters,
            granularity=args.mode,
            count_newlines=args.count_newlines,
            chunk_size=args.chunk_size,
            block_size=args.block_size,
            jobs=args.jobs,
        )
        if sink is None:
            sink = ElasticSink() if args.elastic else TabSeparatedSink()
        self.sink = SynchronizedSink(sink)
        self.aggregator = Aggregator(self.request, self.sink)

    def execute(self) -> RunResult:
        """Run the count and flush the output.

        Returns:
            RunResult: Totals and per-file outcomes.

        Raises:
            FatalError: If an input cannot be opened or output cannot be written.
        """
        try:
            result = self.aggregator.run(self.args.files)
        except BaseException:
            # Rows written before the abort still reach the user.
            self._close_quietly()
            raise
        self.sink.close()
        return result

    def _close_quietly(self) -> None:
        try:
            self.sink.close()
        except SinkError as exc:
            logger.debug("Ignoring output flush failure after abort: %s", exc)


__all__ = ["CountCommand"]
