#!/usr/bin/env python3
"""Cell Wars - Main entry point.

A turn-based territory-control game where you and the computer each start
with one city and race to destroy the other's cities.
"""

import sys

from cell_wars.cli import main

if __name__ == "__main__":
    sys.exit(main())
