# -*- coding: utf-8 -*-
"""Entry point for ``python -m layerwarp``."""

import sys

from layerwarp.cli import main

if __name__ == "__main__":
    sys.exit(main())
