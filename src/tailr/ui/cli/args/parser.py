"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn, final

from tailr import __version__
from tailr.config.config import Config
from tailr.config.settings import runtime_settings
from tailr.features.suffix import CountUnit, InvalidCountSpecError, parse_count
from tailr.platform.logging import logger, setup_logger
from tailr.ui.cli.args.options import TailArgs


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
            prog="tailr",
            description="Print the last part of each FILE to standard output.",
            epilog=(
                "SPEC is [+-]NUM. NUM or -NUM selects the last NUM units, "
                "+NUM starts at unit NUM, +0 selects everything and 0 nothing."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "files",
            nargs="+",
            help="Input file(s); '-' reads standard input",
            metavar="FILE",
        )
        count_group = parser.add_mutually_exclusive_group()
        _ = count_group.add_argument(
            "-n",
            "--lines",
            type=str,
            default=None,
            help="Number of lines (default: 10, configurable)",
            metavar="SPEC",
        )
        _ = count_group.add_argument(
            "-c",
            "--bytes",
            type=str,
            default=None,
            help="Number of bytes",
            metavar="SPEC",
        )
        _ = parser.add_argument(
            "-q",
            "--quiet",
            "--silent",
            action="store_true",
            help="Never print headers giving file names",
        )
        _ = parser.add_argument(
            "--debug",
            action="store_true",
            help="Log per-file totals and start offsets to stderr",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> TailArgs:
        """Process command line arguments.

        Count specs are parsed here, before any file is touched.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            TailArgs: Processed command line arguments.

        Raises:
            SystemExit: If a count spec is malformed.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        log_level = logging.DEBUG if parsed_args.debug else logging.INFO

        configuration = Config.load()
        settings = runtime_settings(configuration)
        _ = setup_logger(log_file=settings.log_file, console_level=log_level)

        if parsed_args.bytes is not None:
            unit = CountUnit.BYTES
            raw_spec: str = parsed_args.bytes
        else:
            unit = CountUnit.LINES
            raw_spec = (
                parsed_args.lines
                if parsed_args.lines is not None
                else settings.default_line_spec
            )

        try:
            directive = parse_count(raw_spec)
        except InvalidCountSpecError as e:
            ArgumentParser._reject_count(unit, e.value)

        return TailArgs(
            files=tuple(parsed_args.files),
            directive=directive,
            unit=unit,
            quiet=parsed_args.quiet,
            debug=parsed_args.debug,
            read_block_size=settings.read_block_size,
            spool_max_size=settings.spool_max_size,
        )

    @staticmethod
    def _reject_count(unit: CountUnit, value: str) -> NoReturn:
        logger.error(
            "illegal %s count -- %s",
            unit.label,
            value,
            extra={
                "tail_event": "tail.count.invalid",
                "count_label": unit.label,
                "count_value": value,
            },
        )
        sys.exit(1)
