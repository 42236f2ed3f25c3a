"""Command line interface for uwc."""

from typing import Final, final

from uwc.features.counting.domain import FatalError
from uwc.platform.logging import logger
from uwc.ui.cli.args import ArgumentParser, CountArgs
from uwc.ui.cli.commands import CountCommand

EXIT_SUCCESS: Final[int] = 0
EXIT_PARTIAL_FAILURE: Final[int] = 1
EXIT_FATAL: Final[int] = 2
EXIT_INTERRUPTED: Final[int] = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments and run the count.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: ``EXIT_SUCCESS`` when every input was counted completely,
            ``EXIT_PARTIAL_FAILURE`` when some input failed part way, and
            ``EXIT_FATAL`` when the run was aborted.
        """
        try:
            args: CountArgs = ArgumentParser.process_args(args_list)
            result = CountCommand(args).execute()
            return EXIT_SUCCESS if result.success else EXIT_PARTIAL_FAILURE

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except FatalError as e:
            logger.error("Error: %s", e)
            return EXIT_FATAL
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return EXIT_FATAL


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor.process_command()
