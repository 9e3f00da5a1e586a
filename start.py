"""Simple launcher for the console route planner.

Runs ``metro_planner.cli.main`` and exits with its status code.
"""

from __future__ import annotations

import sys

from metro_planner.cli import main

if __name__ == "__main__":
    sys.exit(main())
