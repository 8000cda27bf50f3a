"""Report ledger service.

Owns Report records and enforces the submission gate, the status state
machine, the content-access gate and exactly-once rewards.

Status State Machine:
    PENDING -> INVESTIGATING, VERIFIED, REJECTED
    INVESTIGATING -> VERIFIED, REJECTED
    VERIFIED -> CLOSED
    REJECTED -> CLOSED
    CLOSED is terminal

Ledger Invariants:
- Only verified identities submit; ids are sequential and never reused
- Only the reporter or an allowlisted verifier reads plaintext, and the
  access check runs before the cipher is touched
- Only verifiers (or the admin) change status, and only along the matrix
- reward_claimed is written before the reward is minted, so a reentrant
  claim during the mint fails DoubleClaimError
- The status write on entering VERIFIED is saved before the investigator
  reward is minted, under the same rule
"""

from __future__ import annotations

from itertools import islice

from structlog import get_logger

from guardian_ledger.application.dtos.ledger import LedgerStats
from guardian_ledger.application.ports.allowlist import AllowlistProtocol
from guardian_ledger.application.ports.content_cipher import ContentCipherProtocol
from guardian_ledger.application.ports.identity_registry import (
    IdentityCheckerProtocol,
)
from guardian_ledger.application.ports.report_repository import (
    ReportRepositoryProtocol,
)
from guardian_ledger.application.ports.reward_minter import RewardMinterProtocol
from guardian_ledger.application.ports.time_authority import TimeAuthorityProtocol
from guardian_ledger.application.services.ledger_sequencer import LedgerSequencer
from guardian_ledger.config.ledger_config import (
    DEFAULT_LEDGER_CONFIG,
    REPORT_LEDGER_ADDRESS,
    RewardConfig,
)
from guardian_ledger.domain.errors import (
    AdminOnlyError,
    ContentIntegrityError,
    EmptyContentError,
    InvalidLimitError,
    NotReporterError,
    ReportNotFoundError,
    UnauthorizedError,
    VerificationRequiredError,
)
from guardian_ledger.domain.events import (
    MINT_REASON_INVESTIGATOR_REWARD,
    MINT_REASON_REPORTER_REWARD,
    ContentAccessedEvent,
    ContentAccessRole,
    ReportStatusChangedEvent,
    ReportSubmittedEvent,
    RewardClaimedEvent,
    VerifierAllowlistChangedEvent,
)
from guardian_ledger.domain.exceptions import LedgerError
from guardian_ledger.domain.models.address import normalize_address
from guardian_ledger.domain.models.report import (
    Report,
    ReportInfo,
    ReportStatus,
    compute_content_hash,
)

logger = get_logger(__name__)


class ReportLedgerService:
    """Service for the confidential report lifecycle.

    The ledger mints rewards as REPORT_LEDGER_ADDRESS (by default), which
    must be an allowlisted minter of the incentive token.

    Example:
        >>> reports = ReportLedgerService(
        ...     reports=report_repo,
        ...     verifiers=verifiers,
        ...     identity=registry,
        ...     minter=token,
        ...     cipher=cipher,
        ...     sequencer=sequencer,
        ...     time_authority=time_authority,
        ...     admin=admin,
        ... )
        >>> report_id = await reports.submit(alice, "hello")
        >>> await reports.update_status(verifier, report_id, ReportStatus.VERIFIED)
        >>> await reports.claim_reward(alice, report_id)
    """

    def __init__(
        self,
        reports: ReportRepositoryProtocol,
        verifiers: AllowlistProtocol,
        identity: IdentityCheckerProtocol,
        minter: RewardMinterProtocol,
        cipher: ContentCipherProtocol,
        sequencer: LedgerSequencer,
        time_authority: TimeAuthorityProtocol,
        admin: str,
        rewards: RewardConfig | None = None,
        *,
        max_list_limit: int = DEFAULT_LEDGER_CONFIG.max_list_limit,
        ledger_address: str = REPORT_LEDGER_ADDRESS,
    ) -> None:
        """Initialize the report ledger.

        Args:
            reports: Report arena and indexes.
            verifiers: Verifier allowlist.
            identity: Identity predicates for the submission gate.
            minter: Token minting for rewards.
            cipher: Report content cipher.
            sequencer: Ledger transaction sequencer.
            time_authority: Injected clock.
            admin: Ledger admin address.
            rewards: Reward amounts. Uses default if not provided.
            max_list_limit: Largest limit list_by_status accepts.
            ledger_address: Address the ledger mints rewards as.
        """
        self._reports = reports
        self._verifiers = verifiers
        self._identity = identity
        self._minter = minter
        self._cipher = cipher
        self._sequencer = sequencer
        self._time = time_authority
        self._admin = normalize_address(admin)
        self._rewards = rewards or DEFAULT_LEDGER_CONFIG.rewards
        self._max_list_limit = max_list_limit
        self._address = normalize_address(ledger_address)

    @property
    def address(self) -> str:
        """Address the ledger mints rewards as."""
        return self._address

    # ------------------------------------------------------------------
    # Submission and reads
    # ------------------------------------------------------------------

    async def submit(self, caller: str, content: str) -> int:
        """File a confidential report.

        Args:
            caller: The reporter; must be a verified identity.
            content: Non-empty plaintext.

        Returns:
            The new report id.

        Raises:
            InvalidAddressError: If caller is malformed.
            EmptyContentError: If content is empty.
            VerificationRequiredError: If caller is not verified.
        """
        caller = normalize_address(caller)
        log = logger.bind(caller=caller)

        if not isinstance(content, str) or not content:
            log.warning("report_rejected_empty_content")
            raise EmptyContentError("content")

        async with self._sequencer.transaction("report.submit") as tx:
            if not await self._identity.is_verified(caller):
                log.warning("report_rejected_unverified_caller")
                raise VerificationRequiredError(caller)

            report_id = await self._reports.next_id()
            ciphertext = self._cipher.encrypt(report_id, content.encode("utf-8"))
            now = self._time.now()
            report = Report(
                id=report_id,
                reporter=caller,
                ciphertext=ciphertext,
                content_hash=compute_content_hash(ciphertext),
                timestamp=now,
            )
            await self._reports.save(report)
            tx.record(
                ReportSubmittedEvent(
                    report_id=report_id,
                    reporter=caller,
                    content_hash=report.content_hash,
                    submitted_at=now,
                )
            )

        log.info("report_submitted", report_id=report_id)
        return report_id

    async def get_info(self, report_id: int) -> ReportInfo:
        """Return the public fields of a report.

        Raises:
            ReportNotFoundError: If report_id is unknown.
        """
        return (await self._get_report(report_id)).info()

    async def get_content(self, caller: str, report_id: int) -> str:
        """Return report plaintext to the reporter or a verifier.

        Args:
            caller: The requesting address.
            report_id: The report to read.

        Returns:
            The decrypted content.

        Raises:
            ReportNotFoundError: If report_id is unknown.
            UnauthorizedError: If caller is neither reporter nor verifier.
            ContentIntegrityError: If the ciphertext was tampered with.
        """
        caller = normalize_address(caller)
        log = logger.bind(caller=caller, report_id=report_id)

        async with self._sequencer.transaction("report.get_content") as tx:
            report = await self._get_report(report_id)

            if caller == report.reporter:
                role = ContentAccessRole.REPORTER
            elif await self._verifiers.contains(caller):
                role = ContentAccessRole.VERIFIER
            else:
                log.warning("content_access_denied")
                raise UnauthorizedError(caller, f"read report {report_id}")

            if not report.content_intact():
                log.warning("content_integrity_check_failed")
                raise ContentIntegrityError(report_id)

            plaintext = self._cipher.decrypt(report_id, report.ciphertext)
            tx.record(
                ContentAccessedEvent(
                    report_id=report_id,
                    accessor=caller,
                    access_role=role,
                    accessed_at=self._time.now(),
                )
            )

        log.info("content_accessed", access_role=role.value)
        return plaintext.decode("utf-8")

    async def list_by_owner(self, address: str) -> list[int]:
        """Return ids of reports filed by address, in id order."""
        return await self._reports.list_by_owner(normalize_address(address))

    async def list_by_status(self, status: ReportStatus | int, limit: int) -> list[int]:
        """Return up to limit ids of reports currently in status.

        Work stops after limit matches; callers must tolerate truncation.

        Raises:
            InvalidStatusCodeError: If status is not 0-4.
            InvalidLimitError: If limit is outside 1..max_list_limit.
        """
        status = ReportStatus.from_code(status)
        if (
            not isinstance(limit, int)
            or isinstance(limit, bool)
            or not 1 <= limit <= self._max_list_limit
        ):
            raise InvalidLimitError(limit, self._max_list_limit)
        return list(islice(self._reports.iter_by_status(status), limit))

    async def total_reports(self) -> int:
        """Return the number of reports ever submitted."""
        return await self._reports.count()

    async def stats(self, total_users: int = 0) -> LedgerStats:
        """Return report counters.

        Args:
            total_users: Registered user count, supplied by the caller that
                owns the identity registry.
        """
        counts = await self._reports.count_by_status()
        return LedgerStats(
            total_reports=await self._reports.count(),
            total_users=total_users,
            reports_by_status={status: counts.get(status, 0) for status in ReportStatus},
            block_height=self._sequencer.block_height,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def update_status(
        self,
        caller: str,
        report_id: int,
        new_status: ReportStatus | int,
    ) -> ReportInfo:
        """Move a report along the status machine.

        Entering VERIFIED records caller as verifier, saves the report, and
        then mints the investigator reward to caller.

        Args:
            caller: A verifier or the admin.
            report_id: The report to transition.
            new_status: Target status (enum or code 0-4).

        Returns:
            The updated public view.

        Raises:
            InvalidStatusCodeError: If new_status is not 0-4.
            UnauthorizedError: If caller is neither verifier nor admin.
            ReportNotFoundError: If report_id is unknown.
            ClosedImmutableError: If the report is CLOSED.
            IllegalTransitionError: If the edge is not in the matrix.
        """
        caller = normalize_address(caller)
        new_status = ReportStatus.from_code(new_status)
        log = logger.bind(caller=caller, report_id=report_id, new_status=new_status.name)

        async with self._sequencer.transaction("report.update_status") as tx:
            if caller != self._admin and not await self._verifiers.contains(caller):
                log.warning("status_change_rejected_not_verifier")
                raise UnauthorizedError(caller, "update report status")

            report = await self._get_report(report_id)
            now = self._time.now()
            try:
                updated = report.with_status(new_status, actor=caller, at=now)
            except LedgerError as e:
                log.warning(
                    "status_change_rejected",
                    from_status=report.status.name,
                    error_type=type(e).__name__,
                )
                raise

            # Effects before interactions: the status is stored before minting
            await self._reports.save(updated)
            tx.record(
                ReportStatusChangedEvent(
                    report_id=report_id,
                    actor=caller,
                    from_status=report.status,
                    to_status=new_status,
                    changed_at=now,
                )
            )
            if new_status is ReportStatus.VERIFIED:
                await self._minter.mint(
                    self._address,
                    caller,
                    self._rewards.investigator_reward,
                    reason=MINT_REASON_INVESTIGATOR_REWARD,
                )

        log.info("report_status_changed", from_status=report.status.name)
        return updated.info()

    async def claim_reward(self, caller: str, report_id: int) -> int:
        """Claim the reporter reward for a verified report, exactly once.

        Args:
            caller: Must be the report's reporter.
            report_id: The verified report.

        Returns:
            The reward minted, in base units.

        Raises:
            ReportNotFoundError: If report_id is unknown.
            NotReporterError: If caller is not the reporter.
            NotVerifiedError: If the report is not VERIFIED.
            DoubleClaimError: If the reward was already claimed.
        """
        caller = normalize_address(caller)
        log = logger.bind(caller=caller, report_id=report_id)

        async with self._sequencer.transaction("report.claim_reward") as tx:
            report = await self._get_report(report_id)
            if caller != report.reporter:
                log.warning("reward_claim_rejected_not_reporter")
                raise NotReporterError(caller, report_id)
            try:
                claimed = report.with_reward_claimed()
            except LedgerError as e:
                log.warning(
                    "reward_claim_rejected",
                    status=report.status.name,
                    error_type=type(e).__name__,
                )
                raise

            # Effects before interactions: the flag is stored before minting
            await self._reports.save(claimed)
            amount = self._rewards.reporter_reward
            await self._minter.mint(
                self._address,
                caller,
                amount,
                reason=MINT_REASON_REPORTER_REWARD,
            )
            tx.record(
                RewardClaimedEvent(
                    report_id=report_id,
                    reporter=caller,
                    amount=amount,
                    claimed_at=self._time.now(),
                )
            )

        log.info("reward_claimed", amount=str(amount))
        return amount

    # ------------------------------------------------------------------
    # Verifier allowlist
    # ------------------------------------------------------------------

    async def is_verifier(self, address: str) -> bool:
        """Return True if address is on the verifier allowlist."""
        return await self._verifiers.contains(normalize_address(address))

    async def add_verifier(self, caller: str, address: str) -> bool:
        """Add a verifier (admin only).

        Returns:
            True if the allowlist changed.
        """
        return await self._change_verifier(caller, address, added=True)

    async def remove_verifier(self, caller: str, address: str) -> bool:
        """Remove a verifier (admin only).

        Returns:
            True if the allowlist changed.
        """
        return await self._change_verifier(caller, address, added=False)

    async def _change_verifier(self, caller: str, address: str, *, added: bool) -> bool:
        caller = normalize_address(caller)
        address = normalize_address(address)
        if caller != self._admin:
            logger.warning("verifier_change_rejected_not_admin", caller=caller, verifier=address)
            raise AdminOnlyError(caller, "add verifiers" if added else "remove verifiers")

        async with self._sequencer.transaction("report.change_verifier") as tx:
            if added:
                changed = await self._verifiers.add(address)
            else:
                changed = await self._verifiers.remove(address)
            if changed:
                tx.record(
                    VerifierAllowlistChangedEvent(
                        verifier=address,
                        added=added,
                        changed_by=caller,
                        changed_at=self._time.now(),
                    )
                )

        logger.info("verifier_allowlist_changed", verifier=address, added=added, changed=changed)
        return changed

    async def _get_report(self, report_id: int) -> Report:
        report = None
        if isinstance(report_id, int) and not isinstance(report_id, bool):
            report = await self._reports.get(report_id)
        if report is None:
            logger.warning("report_not_found", report_id=report_id)
            raise ReportNotFoundError(report_id)
        return report
