#!/usr/bin/env python3
"""
Mood Co-Worker launcher.

Runs the CLI from a source checkout without installing the package.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moodcoworker.cli import app

if __name__ == "__main__":
    app()
