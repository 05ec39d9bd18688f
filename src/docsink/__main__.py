#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Entry point for running docsink as a module.

This allows the package to be executed as:
    python -m docsink [arguments]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
