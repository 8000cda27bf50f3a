"""Append-only violation error.

Users, reports and stake evidence are never deleted. Any attempt to delete
one raises AppendOnlyViolationError before a store is touched.
"""

from __future__ import annotations

from guardian_ledger.domain.exceptions import LedgerError


class AppendOnlyViolationError(LedgerError):
    """Raised when code attempts to delete an append-only ledger record."""

    pass
