"""Allow ``python -m exportcheck``."""

import sys

from exportcheck.presentation.cli import main

sys.exit(main())
