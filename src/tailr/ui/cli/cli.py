"""Command line interface for tailr."""

import os
import sys
from typing import final

from tailr.config.config import ConfigError
from tailr.platform.logging import logger
from tailr.ui.cli.args import ArgumentParser, TailArgs
from tailr.ui.cli.commands import TailCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Per-file failures are reported but leave the exit status at zero.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: TailArgs = ArgumentParser.process_args(args_list)
            outcomes = TailCommand(args).execute()
            failed = sum(1 for outcome in outcomes if not outcome.ok)
            if failed:
                logger.debug("%d of %d file(s) could not be processed", failed, len(outcomes))
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except BrokenPipeError:
            CommandProcessor._silence_stdout()
            sys.exit(1)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _silence_stdout() -> None:
        """Point stdout at devnull so the interpreter's final flush cannot fail."""

        try:
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        except (OSError, ValueError):
            pass


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes.
    """
    CommandProcessor.process_command()
    return 0
