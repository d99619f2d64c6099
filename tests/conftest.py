"""Pytest configuration for the jsonquote test suite."""

import sys
from pathlib import Path

# Add the repository root to path so jsonquote imports without installing
sys.path.insert(0, str(Path(__file__).parent.parent))
