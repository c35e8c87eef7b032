"""Pytest configuration to ensure the package under src/ is importable.
This keeps test imports like `from normviz...` working without an install.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Project root (for `tests.fixtures`) and src/ (for `normviz`)
PROJECT_ROOT = Path(__file__).resolve().parent.parent
for path in (PROJECT_ROOT, PROJECT_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Import shared fixtures so they're available to all tests
from tests.fixtures.conftest import *  # noqa: E402,F401,F403
