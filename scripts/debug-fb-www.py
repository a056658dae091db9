#!/usr/bin/env python3
"""
Debug an fb-www bundle with Prepack

Usage:
    python scripts/debug-fb-www.py [--root DIR] [--no-color]

Put the input bundle in <root>/fb-www/input.js; the compiled bundle is saved
to <root>/fb-www/output.js.
"""

import os
import sys

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

from prepack_debug.cli import main


if __name__ == "__main__":
    sys.exit(main())
