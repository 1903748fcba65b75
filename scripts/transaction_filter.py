"""Decide which Dredd transactions are skipped during the contract run."""

from __future__ import annotations

from typing import Any, Tuple


# Dredd only tests 2xx responses by default; the health check answers with
# whatever the dependencies report, so it is left out of the contract run.
SKIPPED_PREFIXES: Tuple[str, ...] = ("Health > /__gtg",)


def should_skip(name: str) -> bool:
    return name.startswith(SKIPPED_PREFIXES)


def _get_name(transaction: Any) -> str:
    if isinstance(transaction, dict):
        return transaction["name"]
    return transaction.name


def _mark_skipped(transaction: Any) -> None:
    if isinstance(transaction, dict):
        transaction["skip"] = True
    else:
        transaction.skip = True


def skip_health_checks(transaction: Any) -> None:
    """Mark health-check transactions as skipped; leave the rest alone."""
    name = _get_name(transaction)
    if should_skip(name):
        print(f"skipping: {name}", flush=True)
        _mark_skipped(transaction)
