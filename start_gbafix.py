#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
GBA Fix - Startup Script

Runs the command line fixer from a source checkout without installing it.
"""

import platform
import sys

from gbafix.cli import main


def check_environment() -> bool:
    """Checks the runtime environment."""
    if sys.version_info < (3, 10):
        print(f"ERROR: Python {platform.python_version()} detected. GBA Fix requires Python 3.10 or higher.",
              file=sys.stderr)
        return False
    return True


if __name__ == "__main__":
    if not check_environment():
        sys.exit(1)
    sys.exit(main())
