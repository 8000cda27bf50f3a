"""Adapters from ledger DTOs and errors to API models."""

from guardian_ledger.api.models.ledger import (
    LedgerErrorResponse,
    LedgerStatsResponse,
    ReportInfoResponse,
    StakeVerificationResponse,
    UserStatusResponse,
    VerificationRequirementsResponse,
)
from guardian_ledger.application.dtos.ledger import (
    LedgerStats,
    StakeVerificationResult,
    UserStatus,
    VerificationRequirements,
)
from guardian_ledger.domain.errors import (
    AuthorizationError,
    NotFoundError,
    StakeNotYetConfirmedError,
    StateError,
    TransferSourceUnavailableError,
    ValidationError,
)
from guardian_ledger.domain.exceptions import LedgerError
from guardian_ledger.domain.models.report import ReportInfo

ERROR_TYPE_BASE = "urn:guardian-ledger:error:"

# Checked in order; the first matching class wins
_ERROR_STATUS: tuple[tuple[type[LedgerError], int, str], ...] = (
    (StakeNotYetConfirmedError, 503, "Stake Not Yet Confirmed"),
    (TransferSourceUnavailableError, 503, "Transfer Source Unavailable"),
    (ValidationError, 400, "Invalid Request"),
    (AuthorizationError, 403, "Forbidden"),
    (NotFoundError, 404, "Not Found"),
    (StateError, 409, "Conflict"),
)


class LedgerResponseMapper:
    """Maps ledger results onto API response models."""

    @staticmethod
    def report_info(info: ReportInfo) -> ReportInfoResponse:
        return ReportInfoResponse(
            id=info.id,
            reporter=info.reporter,
            timestamp=info.timestamp,
            status=info.status.name,
            status_code=int(info.status),
            verified_by=info.verified_by,
            verification_timestamp=info.verification_timestamp,
            content_hash=info.content_hash,
            reward_claimed=info.reward_claimed,
        )

    @staticmethod
    def user_status(status: UserStatus) -> UserStatusResponse:
        return UserStatusResponse(
            address=status.address,
            is_registered=status.is_registered,
            is_verified=status.is_verified,
            created_at=status.created_at,
            verified_at=status.verified_at,
            longevity=status.longevity,
        )

    @staticmethod
    def stake_verification(result: StakeVerificationResult) -> StakeVerificationResponse:
        return StakeVerificationResponse(
            registrant=result.registrant,
            tx_ref=result.tx_ref,
            amount=result.amount,
            verified_at=result.verified_at,
            already_applied=result.already_applied,
        )

    @staticmethod
    def verification_requirements(
        requirements: VerificationRequirements,
    ) -> VerificationRequirementsResponse:
        return VerificationRequirementsResponse(
            stake_amount=requirements.stake_amount,
            treasury_address=requirements.treasury_address,
            token_address=requirements.token_address,
            required_confirmations=requirements.required_confirmations,
        )

    @staticmethod
    def stats(stats: LedgerStats) -> LedgerStatsResponse:
        return LedgerStatsResponse(
            total_reports=stats.total_reports,
            total_users=stats.total_users,
            reports_by_status={
                status.name: count for status, count in stats.reports_by_status.items()
            },
            total_supply=stats.total_supply,
            block_height=stats.block_height,
        )

    @staticmethod
    def error(error: LedgerError, instance: str) -> LedgerErrorResponse:
        """Convert a ledger error to RFC 7807 problem details.

        Unclassified ledger errors map to 500.

        Args:
            error: The raised ledger error.
            instance: Operation name or request path.
        """
        status, title = 500, "Ledger Error"
        for error_class, error_status, error_title in _ERROR_STATUS:
            if isinstance(error, error_class):
                status, title = error_status, error_title
                break
        return LedgerErrorResponse(
            type=ERROR_TYPE_BASE + type(error).__name__,
            title=title,
            status=status,
            detail=str(error),
            instance=instance,
        )
