"""Unit tests for API response mapping."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from guardian_ledger.api.adapters import LedgerResponseMapper
from guardian_ledger.application.dtos.ledger import LedgerStats, StakeVerificationResult
from guardian_ledger.domain.errors import (
    AdminOnlyError,
    DoubleClaimError,
    EmptyContentError,
    ReportNotFoundError,
    StakeNotYetConfirmedError,
    StakeRejectedError,
)
from guardian_ledger.domain.exceptions import LedgerError
from guardian_ledger.domain.models.report import ReportInfo, ReportStatus
from guardian_ledger.domain.models.token import ONE_TOKEN

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)
ALICE = "0x" + "a1" * 20


class TestResponses:
    """Tests for DTO to response mapping."""

    def test_report_info(self) -> None:
        info = ReportInfo(
            id=3,
            reporter=ALICE,
            timestamp=NOW,
            status=ReportStatus.VERIFIED,
            verified_by=ALICE,
            verification_timestamp=NOW,
            content_hash="ab" * 32,
            reward_claimed=False,
        )

        data = LedgerResponseMapper.report_info(info).model_dump(mode="json")

        assert data["status"] == "VERIFIED"
        assert data["status_code"] == 2
        assert data["timestamp"] == "2026-01-01T00:00:00Z"

    def test_amounts_serialize_as_strings(self) -> None:
        result = StakeVerificationResult(
            registrant=ALICE, tx_ref="ref", amount=10 * ONE_TOKEN, verified_at=NOW
        )

        data = LedgerResponseMapper.stake_verification(result).model_dump(mode="json")

        assert data["amount"] == "10000000000000000000"
        assert data["already_applied"] is False

    def test_stats_use_status_names(self) -> None:
        stats = LedgerStats(
            total_reports=1,
            total_users=1,
            reports_by_status={s: int(s is ReportStatus.PENDING) for s in ReportStatus},
            total_supply=ONE_TOKEN,
            block_height=9,
        )

        data = LedgerResponseMapper.stats(stats).model_dump(mode="json")

        assert data["reports_by_status"]["PENDING"] == 1
        assert data["total_supply"] == str(ONE_TOKEN)


class TestErrors:
    """Tests for RFC 7807 error mapping."""

    @pytest.mark.parametrize(
        ("error", "status"),
        [
            (EmptyContentError("content"), 400),
            (StakeRejectedError("ref", "wrong_sender"), 400),
            (AdminOnlyError(ALICE, "add verifiers"), 403),
            (ReportNotFoundError(9), 404),
            (DoubleClaimError(1), 409),
            (StakeNotYetConfirmedError("ref", 5), 503),
            (LedgerError("unclassified"), 500),
        ],
    )
    def test_status_codes(self, error: LedgerError, status: int) -> None:
        response = LedgerResponseMapper.error(error, "report.claim_reward")

        assert response.status == status
        assert response.type.endswith(type(error).__name__)
        assert response.detail == str(error)
        assert response.instance == "report.claim_reward"
