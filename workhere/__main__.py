"""Allow running workhere with ``python -m workhere``."""

import sys

from workhere.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
