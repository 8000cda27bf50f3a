"""Ledger primitives for the Guardian Ledger domain layer.

- DeletePreventionMixin: append-only records cannot be deleted
- AtomicOperationContext: all-or-nothing operations with rollback
"""

from guardian_ledger.domain.primitives.ensure_atomicity import AtomicOperationContext
from guardian_ledger.domain.primitives.prevent_delete import DeletePreventionMixin

__all__: list[str] = [
    "AtomicOperationContext",
    "DeletePreventionMixin",
]
