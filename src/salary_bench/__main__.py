"""Entry point for ``python -m salary_bench``."""

import sys

from salary_bench.cli import main

if __name__ == "__main__":
    sys.exit(main())
