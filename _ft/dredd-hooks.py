"""Dredd hooks: load Ersatz fixtures once, skip the health check transaction.

Run with: dredd --language python --hookfiles _ft/dredd-hooks.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import dredd_hooks as hooks

# The hook handler starts from its own console script, not the project root
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scripts.ersatz_fixtures import configure_fixtures  # noqa: E402
from scripts.transaction_filter import skip_health_checks  # noqa: E402


@hooks.before_all
def load_ersatz_fixtures(transactions):
    configure_fixtures()


@hooks.before_each
def skip_health_check(transaction):
    skip_health_checks(transaction)
