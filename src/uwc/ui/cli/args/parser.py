"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from uwc.config.config import Config, ConfigError
from uwc.features.counting import CounterKind, Granularity
from uwc.features.counting.domain import DEFAULT_COUNTERS
from uwc.features.counting.usecases import STDIN_IDENTIFIER
from uwc.platform.logging import logger, setup_logger
from uwc.ui.cli.args.options import CountArgs

# Flag destination -> counter, in the order flags are listed in --help.
_COUNTER_FLAGS: tuple[tuple[str, CounterKind], ...] = (
    ("grapheme_clusters", CounterKind.GRAPHEMES),
    ("bytes", CounterKind.BYTES),
    ("lines", CounterKind.LINES),
    ("words", CounterKind.WORDS),
    ("code_points", CounterKind.CODE_POINTS),
)


def _positive_int(raw: str) -> int:
    """Parse a strictly positive integer for argparse."""

    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer; received {value}")
    return value


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="uwc",
            description="Counts things in strings: lines, words, bytes, graphemes and code points.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "-c",
            "--grapheme-clusters",
            action="store_true",
            help="Count the extended grapheme clusters",
        )
        _ = parser.add_argument(
            "-b",
            "--bytes",
            action="store_true",
            help="Count the number of bytes",
        )
        _ = parser.add_argument(
            "-l",
            "--lines",
            action="store_true",
            help="Count the number of lines",
        )
        _ = parser.add_argument(
            "-w",
            "--words",
            action="store_true",
            help="Count the number of words",
        )
        _ = parser.add_argument(
            "-p",
            "--code-points",
            action="store_true",
            help="Count the Unicode code points",
        )
        _ = parser.add_argument(
            "-m",
            "--mode",
            type=str,
            default=Granularity.FILE.value,
            choices=[granularity.value for granularity in Granularity],
            help="Report one row per file, or one row per line followed by the file total",
        )
        _ = parser.add_argument(
            "-n",
            "--count-newlines",
            action="store_true",
            help="In line mode, keep each line's newline so it is counted",
        )
        _ = parser.add_argument(
            "--chunk-size",
            type=_positive_int,
            metavar="LINES",
            help="Lines read before counting them in parallel",
        )
        _ = parser.add_argument(
            "-j",
            "--jobs",
            type=_positive_int,
            metavar="N",
            help="Worker threads used for counting",
        )
        elastic_group = parser.add_mutually_exclusive_group()
        _ = elastic_group.add_argument(
            "--elastic",
            action="store_const",
            const=True,
            dest="elastic",
            help="Align output columns (default)",
        )
        _ = elastic_group.add_argument(
            "--no-elastic",
            action="store_const",
            const=False,
            dest="elastic",
            help="Write raw tab-separated output",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            metavar="CONFIG_PATH",
            help="Configuration file to use instead of the default location",
        )
        verbosity_group = parser.add_mutually_exclusive_group()
        _ = verbosity_group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed progress on stderr",
        )
        _ = verbosity_group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )
        _ = parser.add_argument(
            "files",
            nargs="*",
            default=[STDIN_IDENTIFIER],
            metavar="FILE",
            help='Input file(s). "-" reads standard input (default)',
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CountArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CountArgs: Processed command line arguments.

        Raises:
            SystemExit: If parsing fails or the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        _ = setup_logger(console_level=log_level)

        config_path = Path(parsed_args.config).expanduser() if parsed_args.config else None
        try:
            configuration = Config.load(config_path)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(2)

        if configuration.log_file is not None:
            _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        return CountArgs(
            files=list(parsed_args.files) or [STDIN_IDENTIFIER],
            counters=ArgumentParser._resolve_counters(parsed_args),
            mode=Granularity.from_user_input(parsed_args.mode),
            count_newlines=parsed_args.count_newlines,
            chunk_size=parsed_args.chunk_size or configuration.chunk_size,
            block_size=configuration.block_size,
            jobs=parsed_args.jobs or configuration.jobs,
            elastic=(
                configuration.elastic if parsed_args.elastic is None else parsed_args.elastic
            ),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            log_file=configuration.log_file,
        )

    @staticmethod
    def _resolve_counters(parsed_args: argparse.Namespace) -> tuple[CounterKind, ...]:
        counters = tuple(
            counter for flag, counter in _COUNTER_FLAGS if getattr(parsed_args, flag, False)
        )
        # Pick some defaults if the user doesn't specify any counters.
        return counters or DEFAULT_COUNTERS


__all__ = ["ArgumentParser"]
