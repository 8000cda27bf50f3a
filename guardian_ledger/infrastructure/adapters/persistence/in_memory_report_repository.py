"""In-memory report arena with owner and status indexes.

Reports are keyed by id. Two indexes are maintained alongside the records,
both kept in ascending id order:

- reporter address -> report ids
- status -> report ids currently in that status

list_by_status walks the status index lazily so that a bounded listing
does work proportional to its limit, not to the number of reports.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass
from typing import cast

from guardian_ledger.application.ports.report_repository import (
    ReportRepositoryProtocol,
)
from guardian_ledger.domain.models.report import Report, ReportStatus


@dataclass(frozen=True)
class _ReportArenaSnapshot:
    last_id: int
    reports: dict[int, Report]
    by_owner: dict[str, list[int]]
    by_status: dict[ReportStatus, list[int]]


class InMemoryReportRepository(ReportRepositoryProtocol):
    """Dict-backed implementation of ReportRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize an empty arena."""
        self._last_id = 0
        self._reports: dict[int, Report] = {}
        self._by_owner: dict[str, list[int]] = {}
        self._by_status: dict[ReportStatus, list[int]] = {s: [] for s in ReportStatus}

    async def next_id(self) -> int:
        """Reserve and return the next report id."""
        self._last_id += 1
        return self._last_id

    async def get(self, report_id: int) -> Report | None:
        """Return the report with report_id, or None."""
        return self._reports.get(report_id)

    async def save(self, report: Report) -> None:
        """Insert or replace a report and update both indexes."""
        previous = self._reports.get(report.id)
        self._reports[report.id] = report

        if previous is None:
            bisect.insort(self._by_owner.setdefault(report.reporter, []), report.id)
            bisect.insort(self._by_status[report.status], report.id)
        elif previous.status is not report.status:
            self._by_status[previous.status].remove(report.id)
            bisect.insort(self._by_status[report.status], report.id)

    async def list_by_owner(self, address: str) -> list[int]:
        """Return ids of reports filed by address, in id order."""
        return list(self._by_owner.get(address, ()))

    def iter_by_status(self, status: ReportStatus) -> Iterator[int]:
        """Lazily iterate ids of reports currently in status, in id order."""
        return iter(self._by_status[status])

    async def count(self) -> int:
        """Return the number of reports ever submitted."""
        return len(self._reports)

    async def count_by_status(self) -> dict[ReportStatus, int]:
        """Return the number of reports in each status."""
        return {status: len(ids) for status, ids in self._by_status.items()}

    def snapshot(self) -> _ReportArenaSnapshot:
        """Capture the arena, its id counter and both indexes."""
        return _ReportArenaSnapshot(
            last_id=self._last_id,
            reports=dict(self._reports),
            by_owner={owner: list(ids) for owner, ids in self._by_owner.items()},
            by_status={status: list(ids) for status, ids in self._by_status.items()},
        )

    def restore(self, snapshot: object) -> None:
        """Restore a snapshot taken by snapshot()."""
        snapshot = cast(_ReportArenaSnapshot, snapshot)
        self._last_id = snapshot.last_id
        self._reports = dict(snapshot.reports)
        self._by_owner = {owner: list(ids) for owner, ids in snapshot.by_owner.items()}
        self._by_status = {status: list(ids) for status, ids in snapshot.by_status.items()}
