"""Allow ``python -m uwc``."""

import sys

from uwc.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
