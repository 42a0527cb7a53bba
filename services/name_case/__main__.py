"""
Entry point for running the name case service as a module.

Usage:
    python -m services.name_case [names ...]
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
