"""Run gopdeps as ``python -m gopdeps``."""

import sys

from gopdeps.presentation.cli import main

sys.exit(main())
