# Copyright (c) 2025
# MIT License
"""Allow running as `python -m lbnet`."""

import sys

from lbnet.cli import main

sys.exit(main())
