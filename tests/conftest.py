"""Pytest fixtures and configuration for the Dredd hook tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is importable for scripts/* modules
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
