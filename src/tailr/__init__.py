"""tailr: print the trailing part of files."""

__version__ = "0.1.0"
