"""Allow ``python -m trackmux`` to run the CLI."""

import sys

from trackmux.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
