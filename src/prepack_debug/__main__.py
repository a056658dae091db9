"""
Entry point for running the fb-www debug harness as a module.

Usage: python3 -m prepack_debug
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
