"""Allow ``python -m tailr``."""

from tailr.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
