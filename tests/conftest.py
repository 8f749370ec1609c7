"""Pytest configuration for the typeis test suite."""

import sys
from pathlib import Path

# Add the repository root to the path so tests run without an install
sys.path.insert(0, str(Path(__file__).parent.parent))
