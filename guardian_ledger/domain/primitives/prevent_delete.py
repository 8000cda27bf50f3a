"""Ledger primitive: prevent deletion of append-only records.

Users, reports and stake evidence are created once and only ever mutated
through their own transition methods. They are never removed. Records mix
in DeletePreventionMixin so that an attempted delete fails loudly instead
of being silently ignored by a store.

Usage:
    @dataclass(frozen=True)
    class Report(DeletePreventionMixin):
        ...

    report.delete()  # Raises AppendOnlyViolationError
"""

from guardian_ledger.domain.errors.append_only import AppendOnlyViolationError


class DeletePreventionMixin:
    """Mixin that makes delete() on a ledger record always fail.

    Example:
        >>> class Record(DeletePreventionMixin):
        ...     pass
        >>> Record().delete()  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        AppendOnlyViolationError: Deletion prohibited...
    """

    def delete(self) -> None:
        """Raise AppendOnlyViolationError; ledger records are never deleted.

        Raises:
            AppendOnlyViolationError: Always.
        """
        raise AppendOnlyViolationError(
            f"Deletion prohibited - {type(self).__name__} records are append-only"
        )
