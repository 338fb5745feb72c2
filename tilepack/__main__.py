# -*- coding: utf-8 -*-
"""Entry point for ``python -m tilepack``."""
import sys

from tilepack.cli import main

if __name__ == "__main__":
    sys.exit(main())
