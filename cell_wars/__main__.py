"""Allow ``python -m cell_wars``."""

import sys

from .cli import main

sys.exit(main())
