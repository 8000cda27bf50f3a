"""Report repository port for the report ledger."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from typing import Protocol

from guardian_ledger.domain.models.report import Report, ReportStatus


class ReportRepositoryProtocol(Protocol):
    """Arena of Report records keyed by id.

    The repository owns the id counter and keeps two indexes in step with
    the records: report ids by reporter and report ids by status, each in
    id order.
    """

    @abstractmethod
    async def next_id(self) -> int:
        """Reserve and return the next report id (1-indexed, never reused)."""
        ...

    @abstractmethod
    async def get(self, report_id: int) -> Report | None:
        """Return the report with report_id, or None."""
        ...

    @abstractmethod
    async def save(self, report: Report) -> None:
        """Insert or replace a report and update both indexes."""
        ...

    @abstractmethod
    async def list_by_owner(self, address: str) -> list[int]:
        """Return ids of reports filed by address, in id order."""
        ...

    @abstractmethod
    def iter_by_status(self, status: ReportStatus) -> Iterator[int]:
        """Lazily iterate ids of reports currently in status, in id order."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of reports ever submitted."""
        ...

    @abstractmethod
    async def count_by_status(self) -> dict[ReportStatus, int]:
        """Return the number of reports in each status."""
        ...
