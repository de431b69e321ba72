"""Allow running as python -m ao_core."""

import sys

from ao_core.cli import main

if __name__ == "__main__":
    sys.exit(main())
