"""
Entry point for running Filter Studio as a module.

Usage:
    python -m filter_studio IMAGE
"""

import sys

from filter_studio.main import main

if __name__ == "__main__":
    sys.exit(main())
