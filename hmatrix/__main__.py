"""Allow ``python -m hmatrix``."""

import sys

from hmatrix.cli import main

sys.exit(main())
