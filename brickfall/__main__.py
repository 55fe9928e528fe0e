"""Allow ``python -m brickfall``."""

import sys

from brickfall.main import main

sys.exit(main())
