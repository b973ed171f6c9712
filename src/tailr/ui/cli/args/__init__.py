"""Command line argument handling package."""

from tailr.ui.cli.args.parser import ArgumentParser
from tailr.ui.cli.args.options import TailArgs

__all__ = ["ArgumentParser", "TailArgs"]
