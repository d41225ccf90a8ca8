#!/usr/bin/env python3
"""Entry point for running snippetfmt as a module.

This allows the package to be executed as:
    python -m snippetfmt [arguments]
"""

import sys

from snippetfmt.cli import main

if __name__ == "__main__":
    sys.exit(main())
