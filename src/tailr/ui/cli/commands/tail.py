"""Tail command implementation for the CLI."""

from __future__ import annotations

import sys
from typing import BinaryIO, final

from tailr.application.services.tail_service import FileOutcome, TailRequest, TailService
from tailr.platform.logging import logger
from tailr.ui.cli.args.options import TailArgs


@final
class TailCommand:
    """Command that streams the selected suffix of each file to stdout."""

    def __init__(
        self,
        args: TailArgs,
        *,
        stdout: BinaryIO | None = None,
        stdin: BinaryIO | None = None,
    ) -> None:
        self.args = args
        self.service = TailService(
            sink=stdout if stdout is not None else sys.stdout.buffer,
            stdin=stdin,
            block_size=args.read_block_size,
            spool_max_size=args.spool_max_size,
            logger=logger,
        )

    def execute(self) -> list[FileOutcome]:
        """Execute the tail command."""

        request = TailRequest(
            files=self.args.files,
            directive=self.args.directive,
            unit=self.args.unit,
            quiet=self.args.quiet,
        )
        return self.service.run(request)
