"""Allow ``python -m xox_coordinator``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
