"""Stake gate service: token transfer in, identity verification out.

Given a registrant and the reference of a transfer they made, the gate:

1. Polls the transfer source until the transfer is final (outside any
   ledger transaction, with bounded retries)
2. Inside one ledger transaction:
   a. Checks the reference has not been consumed
   b. Checks sender == registrant
   c. Checks recipient == treasury, exactly
   d. Checks amount >= the configured stake
   e. Records the evidence and calls the registry's verify entry point

Any failed check aborts with no state change. A registry failure (for
example the registrant never registered) rolls the evidence back too, so
the reference stays usable.

Ledger Invariants:
- A transfer reference grants at most one verification
- "Not yet confirmed" is retryable, never a permanent rejection
- Re-presenting a reference already consumed for the same registrant is a no-op
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from structlog import get_logger

from guardian_ledger.application.dtos.ledger import (
    StakeVerificationResult,
    VerificationRequirements,
)
from guardian_ledger.application.ports.identity_registry import (
    IdentityVerifierProtocol,
)
from guardian_ledger.application.ports.stake_evidence_repository import (
    StakeEvidenceRepositoryProtocol,
)
from guardian_ledger.application.ports.time_authority import TimeAuthorityProtocol
from guardian_ledger.application.ports.transfer_source import TransferSourceProtocol
from guardian_ledger.application.services.ledger_sequencer import LedgerSequencer
from guardian_ledger.config.ledger_config import (
    DEFAULT_LEDGER_CONFIG,
    INCENTIVE_TOKEN_ADDRESS,
    STAKE_GATE_ADDRESS,
    StakeConfig,
)
from guardian_ledger.domain.errors import (
    EmptyContentError,
    StakeNotYetConfirmedError,
    StakeRejectedError,
    StakeReplayError,
    TransferSourceUnavailableError,
)
from guardian_ledger.domain.events import StakeEvidenceConsumedEvent
from guardian_ledger.domain.models.address import normalize_address
from guardian_ledger.domain.models.stake import (
    StakeEvidence,
    StakeTransfer,
    TransferConfirmation,
)

logger = get_logger(__name__)

SleepFn = Callable[[float], Awaitable[None]]


class StakeGateService:
    """Service that verifies identities against a staked token transfer.

    The gate address must be on the identity registry's oracle allowlist.

    Example:
        >>> gate = StakeGateService(
        ...     transfer_source=transfer_source,
        ...     evidence=evidence_repo,
        ...     identity=registry,
        ...     sequencer=sequencer,
        ...     time_authority=time_authority,
        ... )
        >>> receipt = await token.transfer(alice, gate.treasury_address, stake)
        >>> result = await gate.verify_stake(alice, receipt.tx_ref)
        >>> result.already_applied
        False
    """

    def __init__(
        self,
        transfer_source: TransferSourceProtocol,
        evidence: StakeEvidenceRepositoryProtocol,
        identity: IdentityVerifierProtocol,
        sequencer: LedgerSequencer,
        time_authority: TimeAuthorityProtocol,
        config: StakeConfig | None = None,
        *,
        gate_address: str = STAKE_GATE_ADDRESS,
        token_address: str = INCENTIVE_TOKEN_ADDRESS,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        """Initialize the stake gate.

        Args:
            transfer_source: Where transfers are looked up.
            evidence: Consumed reference store.
            identity: Registry verification entry point.
            sequencer: Ledger transaction sequencer.
            time_authority: Injected clock.
            config: Stake settings. Uses default if not provided.
            gate_address: Address the gate verifies as (an oracle).
            token_address: Token the stake is paid in.
            sleep: Awaitable sleep used between polls (injected in tests).
        """
        self._transfer_source = transfer_source
        self._evidence = evidence
        self._identity = identity
        self._sequencer = sequencer
        self._time = time_authority
        self._config = config or DEFAULT_LEDGER_CONFIG.stake
        self._gate_address = normalize_address(gate_address)
        self._token_address = normalize_address(token_address)
        self._sleep = sleep

    @property
    def address(self) -> str:
        """Address the gate verifies as."""
        return self._gate_address

    @property
    def treasury_address(self) -> str:
        """Address stakes must be paid to."""
        return self._config.treasury_address

    def verification_requirements(self) -> VerificationRequirements:
        """Return what a registrant must pay to be verified."""
        return VerificationRequirements(
            stake_amount=self._config.stake_amount,
            treasury_address=self._config.treasury_address,
            token_address=self._token_address,
            required_confirmations=self._config.required_confirmations,
        )

    async def is_consumed(self, tx_ref: str) -> bool:
        """Return True if tx_ref has already granted a verification."""
        return await self._evidence.get(tx_ref) is not None

    async def verify_stake(self, registrant: str, tx_ref: str) -> StakeVerificationResult:
        """Verify registrant against the transfer referenced by tx_ref.

        Args:
            registrant: Identity to verify; must be the transfer's sender.
            tx_ref: Reference of the stake transfer.

        Returns:
            StakeVerificationResult; already_applied=True when the
            reference had already verified this registrant.

        Raises:
            InvalidAddressError: If registrant is malformed.
            EmptyContentError: If tx_ref is empty.
            StakeReplayError: If tx_ref was consumed for another registrant.
            StakeNotYetConfirmedError: If the transfer is unknown or pending
                after the last poll (retryable).
            StakeRejectedError: If the transfer failed or fails a check.
            UserNotRegisteredError: If registrant is not registered.
            AlreadyVerifiedError: If registrant is already verified.
        """
        registrant = normalize_address(registrant)
        if not isinstance(tx_ref, str) or not tx_ref.strip():
            raise EmptyContentError("tx_ref")
        tx_ref = tx_ref.strip()
        log = logger.bind(registrant=registrant, tx_ref=tx_ref)
        log.info("stake_verification_started")

        existing = await self._check_consumed(registrant, tx_ref)
        if existing is not None:
            return existing

        transfer, attempts = await self._await_confirmation(tx_ref)

        async with self._sequencer.transaction("stake.verify") as tx:
            # The reference may have been consumed while we were polling
            existing = await self._check_consumed(registrant, tx_ref)
            if existing is not None:
                return existing

            self._validate_transfer(registrant, transfer)

            now = self._time.now()
            await self._evidence.save(
                StakeEvidence(
                    tx_ref=tx_ref,
                    registrant=registrant,
                    amount=transfer.amount,
                    consumed_at=now,
                    block_height=tx.height,
                )
            )
            await self._identity.verify(self._gate_address, registrant)
            tx.record(
                StakeEvidenceConsumedEvent(
                    tx_ref=tx_ref,
                    registrant=registrant,
                    amount=transfer.amount,
                    treasury=self._config.treasury_address,
                    consumed_at=now,
                )
            )

        log.info("stake_verified", amount=str(transfer.amount), attempts=attempts)
        return StakeVerificationResult(
            registrant=registrant,
            tx_ref=tx_ref,
            amount=transfer.amount,
            verified_at=now,
            attempts=attempts,
        )

    async def _check_consumed(
        self, registrant: str, tx_ref: str
    ) -> StakeVerificationResult | None:
        """Return a no-op result for a same-registrant retry, or raise on replay."""
        evidence = await self._evidence.get(tx_ref)
        if evidence is None:
            return None
        if evidence.registrant != registrant:
            logger.warning(
                "stake_rejected_replay",
                tx_ref=tx_ref,
                consumed_by=evidence.registrant,
                presented_by=registrant,
            )
            raise StakeReplayError(tx_ref, evidence.registrant, registrant)

        logger.info("stake_already_applied", tx_ref=tx_ref, registrant=registrant)
        return StakeVerificationResult(
            registrant=registrant,
            tx_ref=tx_ref,
            amount=evidence.amount,
            verified_at=evidence.consumed_at,
            already_applied=True,
        )

    async def _await_confirmation(self, tx_ref: str) -> tuple[StakeTransfer, int]:
        """Poll the transfer source until the transfer is final.

        Returns:
            The confirmed transfer and the number of polls made.

        Raises:
            StakeRejectedError: If the transfer failed.
            StakeNotYetConfirmedError: If polls ran out first.
        """
        attempts = self._config.max_poll_attempts
        for attempt in range(1, attempts + 1):
            try:
                transfer = await self._transfer_source.get_transfer(tx_ref)
            except TransferSourceUnavailableError as e:
                logger.warning(
                    "transfer_source_unavailable", tx_ref=tx_ref, attempt=attempt, error=str(e)
                )
                transfer = None

            if transfer is not None:
                if transfer.confirmation is TransferConfirmation.FAILED:
                    logger.warning("stake_rejected_transfer_failed", tx_ref=tx_ref)
                    raise StakeRejectedError(tx_ref, "transfer_failed")
                if transfer.is_final:
                    return transfer, attempt

            logger.debug(
                "stake_not_yet_confirmed",
                tx_ref=tx_ref,
                attempt=attempt,
                confirmations=transfer.confirmations if transfer else 0,
            )
            if attempt < attempts:
                await self._sleep(self._config.poll_interval_seconds)

        logger.warning("stake_confirmation_timed_out", tx_ref=tx_ref, attempts=attempts)
        raise StakeNotYetConfirmedError(tx_ref, attempts)

    def _validate_transfer(self, registrant: str, transfer: StakeTransfer) -> None:
        log = logger.bind(registrant=registrant, tx_ref=transfer.tx_ref)
        if transfer.sender != registrant:
            log.warning("stake_rejected_wrong_sender", sender=transfer.sender)
            raise StakeRejectedError(
                transfer.tx_ref, "wrong_sender", expected=registrant, actual=transfer.sender
            )
        if transfer.recipient != self._config.treasury_address:
            log.warning("stake_rejected_wrong_recipient", recipient=transfer.recipient)
            raise StakeRejectedError(
                transfer.tx_ref,
                "wrong_recipient",
                expected=self._config.treasury_address,
                actual=transfer.recipient,
            )
        if transfer.amount < self._config.stake_amount:
            log.warning("stake_rejected_insufficient_amount", amount=str(transfer.amount))
            raise StakeRejectedError(
                transfer.tx_ref,
                "insufficient_amount",
                expected=self._config.stake_amount,
                actual=transfer.amount,
            )
