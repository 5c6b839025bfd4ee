#!/usr/bin/env python3
"""
GridRace Client Runner

Plays one race over stdin/stdout against the race server.

Usage:
    python run_race.py              # Play a race
    python run_race.py --debug      # With progress logging on stderr
    python run_race.py --help       # Show all options
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from gridrace.cli import main


if __name__ == "__main__":
    sys.exit(main())
