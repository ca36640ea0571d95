#!/usr/bin/env python3
"""Entry point for running doxy2md as a module.

This allows the package to be executed as:
    python -m doxy2md INPUT_FOLDER -o OUTPUT_FOLDER
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
