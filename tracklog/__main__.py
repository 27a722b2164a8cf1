"""Allow ``python -m tracklog``."""

import sys

from tracklog.cli import main

sys.exit(main())
