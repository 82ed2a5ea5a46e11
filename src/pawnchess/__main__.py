"""Allow ``python -m pawnchess``."""

import sys

from pawnchess.app import main

sys.exit(main())
