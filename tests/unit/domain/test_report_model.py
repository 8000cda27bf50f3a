"""Unit tests for the Report model and its status state machine."""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from guardian_ledger.domain.errors import (
    AppendOnlyViolationError,
    ClosedImmutableError,
    DoubleClaimError,
    IllegalTransitionError,
    InvalidStatusCodeError,
    NotVerifiedError,
)
from guardian_ledger.domain.models.report import (
    STATUS_TRANSITION_MATRIX,
    Report,
    ReportStatus,
    compute_content_hash,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)
REPORTER = "0x" + "a1" * 20
VERIFIER = "0x" + "5e" * 20

ALLOWED_EDGES = {
    (ReportStatus.PENDING, ReportStatus.INVESTIGATING),
    (ReportStatus.PENDING, ReportStatus.VERIFIED),
    (ReportStatus.PENDING, ReportStatus.REJECTED),
    (ReportStatus.INVESTIGATING, ReportStatus.VERIFIED),
    (ReportStatus.INVESTIGATING, ReportStatus.REJECTED),
    (ReportStatus.VERIFIED, ReportStatus.CLOSED),
    (ReportStatus.REJECTED, ReportStatus.CLOSED),
}


def _report(status: ReportStatus = ReportStatus.PENDING, **overrides: object) -> Report:
    ciphertext = b"sealed-bytes"
    report = Report(
        id=1,
        reporter=REPORTER,
        ciphertext=ciphertext,
        content_hash=compute_content_hash(ciphertext),
        timestamp=NOW,
    )
    return replace(report, status=status, **overrides)


class TestReportStatusCodes:
    """Tests for the stable external status codes."""

    def test_codes_are_stable(self) -> None:
        """Codes 0-4 map to the documented statuses."""
        assert [s.name for s in ReportStatus] == [
            "PENDING",
            "INVESTIGATING",
            "VERIFIED",
            "REJECTED",
            "CLOSED",
        ]
        assert [int(s) for s in ReportStatus] == [0, 1, 2, 3, 4]

    @pytest.mark.parametrize("code", [0, 1, 2, 3, 4])
    def test_from_code_accepts_known_codes(self, code: int) -> None:
        assert ReportStatus.from_code(code) == code

    @pytest.mark.parametrize("code", [-1, 5, 99, "2", 2.0, None, True])
    def test_from_code_rejects_unknown_codes(self, code: object) -> None:
        """Out-of-range codes, non-ints and bools are rejected."""
        with pytest.raises(InvalidStatusCodeError):
            ReportStatus.from_code(code)

    def test_from_code_passes_enum_through(self) -> None:
        assert ReportStatus.from_code(ReportStatus.CLOSED) is ReportStatus.CLOSED

    def test_only_closed_is_terminal(self) -> None:
        assert [s for s in ReportStatus if s.is_terminal()] == [ReportStatus.CLOSED]

    def test_display_name(self) -> None:
        assert ReportStatus.INVESTIGATING.display_name == "Investigating"


class TestTransitionMatrix:
    """Tests for the status transition matrix."""

    def test_matrix_matches_documented_edges(self) -> None:
        edges = {
            (source, target)
            for source, targets in STATUS_TRANSITION_MATRIX.items()
            for target in targets
        }
        assert edges == ALLOWED_EDGES

    @pytest.mark.parametrize(
        ("source", "target"),
        [
            (s, t)
            for s in ReportStatus
            for t in ReportStatus
            if s is not ReportStatus.CLOSED and (s, t) not in ALLOWED_EDGES
        ],
    )
    def test_disallowed_edges_raise(self, source: ReportStatus, target: ReportStatus) -> None:
        """Every edge outside the matrix fails, including self-loops."""
        report = _report(source)

        with pytest.raises(IllegalTransitionError) as exc_info:
            report.with_status(target, actor=VERIFIER, at=NOW)

        assert exc_info.value.from_status is source
        assert exc_info.value.to_status is target

    @pytest.mark.parametrize("target", list(ReportStatus))
    def test_closed_rejects_every_change(self, target: ReportStatus) -> None:
        report = _report(ReportStatus.CLOSED)

        with pytest.raises(ClosedImmutableError):
            report.with_status(target, actor=VERIFIER, at=NOW)

    def test_entering_verified_records_verifier_and_time(self) -> None:
        updated = _report().with_status(ReportStatus.VERIFIED, actor=VERIFIER, at=NOW)

        assert updated.status is ReportStatus.VERIFIED
        assert updated.verified_by == VERIFIER
        assert updated.verification_timestamp == NOW

    def test_other_transitions_leave_verification_fields_unset(self) -> None:
        updated = _report().with_status(ReportStatus.INVESTIGATING, actor=VERIFIER, at=NOW)

        assert updated.verified_by is None
        assert updated.verification_timestamp is None

    def test_transition_returns_new_instance(self) -> None:
        report = _report()
        report.with_status(ReportStatus.REJECTED, actor=VERIFIER, at=NOW)
        assert report.status is ReportStatus.PENDING


class TestRewardFlag:
    """Tests for with_reward_claimed."""

    def _verified(self) -> Report:
        return _report().with_status(ReportStatus.VERIFIED, actor=VERIFIER, at=NOW)

    def test_claim_on_verified_sets_flag(self) -> None:
        assert self._verified().with_reward_claimed().reward_claimed is True

    def test_second_claim_raises_double_claim(self) -> None:
        claimed = self._verified().with_reward_claimed()
        with pytest.raises(DoubleClaimError):
            claimed.with_reward_claimed()

    @pytest.mark.parametrize(
        "status",
        [ReportStatus.PENDING, ReportStatus.INVESTIGATING, ReportStatus.REJECTED],
    )
    def test_claim_requires_verified(self, status: ReportStatus) -> None:
        with pytest.raises(NotVerifiedError) as exc_info:
            _report(status).with_reward_claimed()
        assert exc_info.value.status is status

    def test_claim_after_close_is_not_verified(self) -> None:
        closed = self._verified().with_status(ReportStatus.CLOSED, actor=VERIFIER, at=NOW)
        with pytest.raises(NotVerifiedError):
            closed.with_reward_claimed()


class TestReportRecord:
    """Tests for Report construction and integrity."""

    def test_ids_are_one_indexed(self) -> None:
        with pytest.raises(ValueError, match="1-indexed"):
            _report(id=0)

    def test_timestamp_must_be_aware(self) -> None:
        with pytest.raises(ValueError, match="timezone-aware"):
            _report(timestamp=datetime(2026, 1, 1))

    def test_reward_claimed_requires_verifier(self) -> None:
        with pytest.raises(ValueError, match="reward_claimed"):
            _report(ReportStatus.VERIFIED, reward_claimed=True)

    def test_content_intact_detects_tampering(self) -> None:
        report = _report()
        assert report.content_intact()
        assert not replace(report, ciphertext=b"tampered").content_intact()

    def test_content_hash_is_blake3_hex(self) -> None:
        digest = compute_content_hash(b"abc")
        assert len(digest) == 64
        assert digest == compute_content_hash(b"abc")
        assert digest != compute_content_hash(b"abd")

    def test_info_exposes_no_ciphertext(self) -> None:
        info = _report().info()
        assert not hasattr(info, "ciphertext")
        assert info.content_hash == _report().content_hash

    def test_repr_hides_ciphertext(self) -> None:
        assert "sealed-bytes" not in repr(_report())

    def test_delete_is_prohibited(self) -> None:
        with pytest.raises(AppendOnlyViolationError):
            _report().delete()
