"""Allow ``python -m src.cli`` execution."""

import sys

from src.cli.console import main

sys.exit(main())
