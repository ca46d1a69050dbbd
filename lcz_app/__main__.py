"""Allow ``python -m lcz_app``."""

import sys

from .cli import main

sys.exit(main())
