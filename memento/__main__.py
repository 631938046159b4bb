"""Entry point for running the demo via: python3 -m memento"""

from __future__ import annotations

import sys

from .app.cli import main


if __name__ == "__main__":
    sys.exit(main())
