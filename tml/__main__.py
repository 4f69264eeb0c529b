"""Entry point for ``python -m tml``."""

import sys

from tml.cli import main

if __name__ == "__main__":
    sys.exit(main())
