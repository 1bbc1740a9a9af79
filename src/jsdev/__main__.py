"""Allow ``python -m jsdev``."""

import sys

from jsdev.cli import main

sys.exit(main())
