"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so the application
layer depends on ports only.
"""

from guardian_ledger.bootstrap.ledger import GuardianLedger, create_guardian_ledger
from guardian_ledger.bootstrap.logging import configure_structlog

__all__: list[str] = [
    "GuardianLedger",
    "configure_structlog",
    "create_guardian_ledger",
]
