"""Allow `python -m resxlint`."""

import sys

from resxlint.cli import main

sys.exit(main())
