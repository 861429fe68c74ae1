"""Allow ``python -m timespan``."""

import sys

from timespan.cli import main

sys.exit(main())
