"""Unit tests for ReportLedgerService."""

from __future__ import annotations

from dataclasses import replace

import pytest

from guardian_ledger.bootstrap import GuardianLedger
from guardian_ledger.domain.errors import (
    AdminOnlyError,
    ClosedImmutableError,
    ContentIntegrityError,
    DoubleClaimError,
    EmptyContentError,
    IllegalTransitionError,
    InvalidLimitError,
    InvalidStatusCodeError,
    NotReporterError,
    NotVerifiedError,
    ReportNotFoundError,
    UnauthorizedError,
    VerificationRequiredError,
)
from guardian_ledger.domain.events import ContentAccessedEvent, ContentAccessRole
from guardian_ledger.domain.models.report import ReportStatus
from guardian_ledger.domain.models.token import ONE_TOKEN
from guardian_ledger.infrastructure.stubs import AuditEventEmitterStub
from tests.helpers import ADMIN, ALICE, BOB, MALLORY, VERIFIER, make_verified

CONTENT = "Contaminated water supply at site 7"


@pytest.fixture
async def reporting_ledger(
    ledger: GuardianLedger, audit_emitter: AuditEventEmitterStub
) -> GuardianLedger:
    """Ledger with ALICE verified and VERIFIER allowlisted."""
    await make_verified(ledger, ALICE)
    await ledger.reports.add_verifier(ADMIN, VERIFIER)
    audit_emitter.clear()
    return ledger


class TestSubmit:
    """Tests for submit."""

    @pytest.mark.asyncio
    async def test_ids_are_sequential_from_one(self, reporting_ledger: GuardianLedger) -> None:
        first = await reporting_ledger.reports.submit(ALICE, "one")
        second = await reporting_ledger.reports.submit(ALICE, "two")

        assert (first, second) == (1, 2)
        assert await reporting_ledger.reports.total_reports() == 2
        assert await reporting_ledger.reports.list_by_owner(ALICE) == [1, 2]

    @pytest.mark.asyncio
    async def test_new_report_is_pending(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)

        info = await reporting_ledger.reports.get_info(report_id)

        assert info.status is ReportStatus.PENDING
        assert info.reporter == ALICE
        assert info.verified_by is None
        assert not info.reward_claimed
        assert len(info.content_hash) == 64

    @pytest.mark.asyncio
    async def test_unverified_caller_rejected(self, reporting_ledger: GuardianLedger) -> None:
        await reporting_ledger.identity.register(BOB, "bob", 1)

        with pytest.raises(VerificationRequiredError):
            await reporting_ledger.reports.submit(BOB, CONTENT)

        assert await reporting_ledger.reports.total_reports() == 0

    @pytest.mark.asyncio
    async def test_rejected_submit_does_not_consume_an_id(
        self, reporting_ledger: GuardianLedger
    ) -> None:
        with pytest.raises(VerificationRequiredError):
            await reporting_ledger.reports.submit(BOB, CONTENT)

        assert await reporting_ledger.reports.submit(ALICE, CONTENT) == 1

    @pytest.mark.asyncio
    async def test_empty_content_rejected(self, reporting_ledger: GuardianLedger) -> None:
        with pytest.raises(EmptyContentError):
            await reporting_ledger.reports.submit(ALICE, "")

    @pytest.mark.asyncio
    async def test_submit_event_carries_no_content(
        self, reporting_ledger: GuardianLedger, audit_emitter: AuditEventEmitterStub
    ) -> None:
        await reporting_ledger.reports.submit(ALICE, CONTENT)

        (event,) = audit_emitter.events_of_type("report.submitted")
        assert CONTENT not in str(event.to_dict())


class TestContentGate:
    """Tests for get_content."""

    @pytest.mark.asyncio
    async def test_reporter_reads_content(
        self, reporting_ledger: GuardianLedger, audit_emitter: AuditEventEmitterStub
    ) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)

        assert await reporting_ledger.reports.get_content(ALICE, report_id) == CONTENT
        (event,) = audit_emitter.events_of_type("report.content_accessed")
        assert isinstance(event, ContentAccessedEvent)
        assert event.access_role is ContentAccessRole.REPORTER

    @pytest.mark.asyncio
    async def test_verifier_reads_content(
        self, reporting_ledger: GuardianLedger, audit_emitter: AuditEventEmitterStub
    ) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)

        assert await reporting_ledger.reports.get_content(VERIFIER, report_id) == CONTENT
        (event,) = audit_emitter.events_of_type("report.content_accessed")
        assert event.access_role is ContentAccessRole.VERIFIER  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("caller", [BOB, MALLORY, ADMIN])
    async def test_everyone_else_is_refused(
        self,
        reporting_ledger: GuardianLedger,
        audit_emitter: AuditEventEmitterStub,
        caller: str,
    ) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)
        audit_emitter.clear()

        with pytest.raises(UnauthorizedError):
            await reporting_ledger.reports.get_content(caller, report_id)
        assert audit_emitter.emitted == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        [
            (ReportStatus.INVESTIGATING, ReportStatus.VERIFIED, ReportStatus.CLOSED),
            (ReportStatus.INVESTIGATING, ReportStatus.REJECTED, ReportStatus.CLOSED),
            (ReportStatus.REJECTED, ReportStatus.CLOSED),
        ],
        ids=["verified", "investigated-then-rejected", "rejected"],
    )
    async def test_gate_holds_in_every_status(
        self,
        reporting_ledger: GuardianLedger,
        audit_emitter: AuditEventEmitterStub,
        path: tuple[ReportStatus, ...],
    ) -> None:
        reports = reporting_ledger.reports
        report_id = await reports.submit(ALICE, CONTENT)

        for status in (ReportStatus.PENDING, *path):
            if status is not ReportStatus.PENDING:
                await reports.update_status(VERIFIER, report_id, status)
            assert (await reports.get_info(report_id)).status is status
            audit_emitter.clear()

            with pytest.raises(UnauthorizedError):
                await reports.get_content(MALLORY, report_id)
            assert audit_emitter.events_of_type("report.content_accessed") == []

            assert await reports.get_content(ALICE, report_id) == CONTENT
            assert await reports.get_content(VERIFIER, report_id) == CONTENT
            roles = [
                event.access_role  # type: ignore[attr-defined]
                for event in audit_emitter.events_of_type("report.content_accessed")
            ]
            assert roles == [ContentAccessRole.REPORTER, ContentAccessRole.VERIFIER]

    @pytest.mark.asyncio
    async def test_removed_verifier_is_refused(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)
        await reporting_ledger.reports.remove_verifier(ADMIN, VERIFIER)

        with pytest.raises(UnauthorizedError):
            await reporting_ledger.reports.get_content(VERIFIER, report_id)

    @pytest.mark.asyncio
    async def test_unknown_report(self, reporting_ledger: GuardianLedger) -> None:
        with pytest.raises(ReportNotFoundError):
            await reporting_ledger.reports.get_content(ALICE, 42)

    @pytest.mark.asyncio
    async def test_tampered_ciphertext_detected(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)
        repo = reporting_ledger.reports._reports
        report = await repo.get(report_id)
        assert report is not None
        await repo.save(replace(report, ciphertext=report.ciphertext[:-1] + b"\x00"))

        with pytest.raises(ContentIntegrityError):
            await reporting_ledger.reports.get_content(ALICE, report_id)


class TestUpdateStatus:
    """Tests for update_status."""

    @pytest.mark.asyncio
    async def test_verifier_moves_report_and_earns_reward(
        self, reporting_ledger: GuardianLedger, audit_emitter: AuditEventEmitterStub
    ) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)

        await reporting_ledger.reports.update_status(VERIFIER, report_id, ReportStatus.INVESTIGATING)
        info = await reporting_ledger.reports.update_status(VERIFIER, report_id, 2)

        assert info.status is ReportStatus.VERIFIED
        assert info.verified_by == VERIFIER
        assert info.verification_timestamp is not None
        assert await reporting_ledger.token.balance_of(VERIFIER) == ONE_TOKEN // 2
        assert "token.minted" in audit_emitter.event_types()

    @pytest.mark.asyncio
    async def test_admin_may_update_status(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)

        info = await reporting_ledger.reports.update_status(ADMIN, report_id, ReportStatus.REJECTED)

        assert info.status is ReportStatus.REJECTED

    @pytest.mark.asyncio
    async def test_non_verifier_rejected(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)

        with pytest.raises(UnauthorizedError):
            await reporting_ledger.reports.update_status(ALICE, report_id, ReportStatus.VERIFIED)

        info = await reporting_ledger.reports.get_info(report_id)
        assert info.status is ReportStatus.PENDING

    @pytest.mark.asyncio
    async def test_illegal_transition_rejected(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)

        with pytest.raises(IllegalTransitionError):
            await reporting_ledger.reports.update_status(VERIFIER, report_id, ReportStatus.CLOSED)

    @pytest.mark.asyncio
    async def test_closed_is_immutable(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)
        await reporting_ledger.reports.update_status(VERIFIER, report_id, ReportStatus.REJECTED)
        await reporting_ledger.reports.update_status(VERIFIER, report_id, ReportStatus.CLOSED)

        with pytest.raises(ClosedImmutableError):
            await reporting_ledger.reports.update_status(VERIFIER, report_id, ReportStatus.PENDING)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [5, -1, True, "1"])
    async def test_invalid_status_code(
        self, reporting_ledger: GuardianLedger, code: object
    ) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)
        with pytest.raises(InvalidStatusCodeError):
            await reporting_ledger.reports.update_status(VERIFIER, report_id, code)  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_unknown_report(self, reporting_ledger: GuardianLedger) -> None:
        with pytest.raises(ReportNotFoundError):
            await reporting_ledger.reports.update_status(VERIFIER, 99, ReportStatus.VERIFIED)

    @pytest.mark.asyncio
    async def test_failed_investigator_mint_reverts_status(
        self, reporting_ledger: GuardianLedger
    ) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)
        await reporting_ledger.token.remove_minter(ADMIN, reporting_ledger.reports.address)

        with pytest.raises(UnauthorizedError):
            await reporting_ledger.reports.update_status(VERIFIER, report_id, ReportStatus.VERIFIED)

        info = await reporting_ledger.reports.get_info(report_id)
        assert info.status is ReportStatus.PENDING
        assert info.verified_by is None

    @pytest.mark.asyncio
    async def test_only_admin_manages_verifiers(self, reporting_ledger: GuardianLedger) -> None:
        with pytest.raises(AdminOnlyError):
            await reporting_ledger.reports.add_verifier(VERIFIER, MALLORY)
        assert not await reporting_ledger.reports.is_verifier(MALLORY)


class TestClaimReward:
    """Tests for claim_reward."""

    async def _verified_report(self, ledger: GuardianLedger) -> int:
        report_id = await ledger.reports.submit(ALICE, CONTENT)
        await ledger.reports.update_status(VERIFIER, report_id, ReportStatus.VERIFIED)
        return report_id

    @pytest.mark.asyncio
    async def test_reporter_claims_once(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await self._verified_report(reporting_ledger)

        amount = await reporting_ledger.reports.claim_reward(ALICE, report_id)

        assert amount == ONE_TOKEN
        assert await reporting_ledger.token.balance_of(ALICE) == ONE_TOKEN
        assert (await reporting_ledger.reports.get_info(report_id)).reward_claimed

        with pytest.raises(DoubleClaimError):
            await reporting_ledger.reports.claim_reward(ALICE, report_id)
        assert await reporting_ledger.token.balance_of(ALICE) == ONE_TOKEN

    @pytest.mark.asyncio
    async def test_only_reporter_may_claim(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await self._verified_report(reporting_ledger)

        with pytest.raises(NotReporterError):
            await reporting_ledger.reports.claim_reward(VERIFIER, report_id)

    @pytest.mark.asyncio
    async def test_claim_requires_verified(self, reporting_ledger: GuardianLedger) -> None:
        report_id = await reporting_ledger.reports.submit(ALICE, CONTENT)

        with pytest.raises(NotVerifiedError):
            await reporting_ledger.reports.claim_reward(ALICE, report_id)

    @pytest.mark.asyncio
    async def test_claim_unknown_report(self, reporting_ledger: GuardianLedger) -> None:
        with pytest.raises(ReportNotFoundError):
            await reporting_ledger.reports.claim_reward(ALICE, 7)

    @pytest.mark.asyncio
    async def test_failed_mint_leaves_reward_unclaimed(
        self, reporting_ledger: GuardianLedger
    ) -> None:
        report_id = await self._verified_report(reporting_ledger)
        await reporting_ledger.token.remove_minter(ADMIN, reporting_ledger.reports.address)

        with pytest.raises(UnauthorizedError):
            await reporting_ledger.reports.claim_reward(ALICE, report_id)

        assert not (await reporting_ledger.reports.get_info(report_id)).reward_claimed


class TestListing:
    """Tests for list_by_status and stats."""

    @pytest.mark.asyncio
    async def test_list_by_status_truncates_to_limit(
        self, reporting_ledger: GuardianLedger
    ) -> None:
        for n in range(5):
            await reporting_ledger.reports.submit(ALICE, f"report {n}")
        await reporting_ledger.reports.update_status(VERIFIER, 2, ReportStatus.REJECTED)

        assert await reporting_ledger.reports.list_by_status(ReportStatus.PENDING, 3) == [1, 3, 4]
        assert await reporting_ledger.reports.list_by_status(3, 10) == [2]
        assert await reporting_ledger.reports.list_by_status(ReportStatus.CLOSED, 10) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -1, 101, True])
    async def test_invalid_limit(self, reporting_ledger: GuardianLedger, limit: object) -> None:
        with pytest.raises(InvalidLimitError):
            await reporting_ledger.reports.list_by_status(ReportStatus.PENDING, limit)  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_list_by_owner_of_stranger_is_empty(
        self, reporting_ledger: GuardianLedger
    ) -> None:
        assert await reporting_ledger.reports.list_by_owner(BOB) == []

    @pytest.mark.asyncio
    async def test_stats(self, reporting_ledger: GuardianLedger) -> None:
        await reporting_ledger.reports.submit(ALICE, "a")
        await reporting_ledger.reports.submit(ALICE, "b")
        await reporting_ledger.reports.update_status(VERIFIER, 1, ReportStatus.VERIFIED)

        stats = await reporting_ledger.stats()

        assert stats.total_reports == 2
        assert stats.total_users == 1
        assert stats.reports_by_status[ReportStatus.PENDING] == 1
        assert stats.reports_by_status[ReportStatus.VERIFIED] == 1
        assert stats.reports_by_status[ReportStatus.CLOSED] == 0
        assert stats.total_supply == ONE_TOKEN // 2
        assert stats.block_height == reporting_ledger.sequencer.block_height
