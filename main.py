#!/usr/bin/env python3
"""
gitlanes - lane layout for git history graphs

This is a convenience wrapper for running from the repo root.
The actual entry point is gitlanes.main:main (for pip install).
"""

import sys

from gitlanes.main import main

if __name__ == "__main__":
    sys.exit(main())
