"""Token faucet service.

Lets any address draw a fixed amount of tokens once per cooldown window,
enough to fund a stake. The faucet mints as its own address, which must be
an allowlisted minter of the incentive token.
"""

from __future__ import annotations

import math
from datetime import datetime

from structlog import get_logger

from guardian_ledger.application.dtos.ledger import FaucetStatus
from guardian_ledger.application.ports.faucet_claim_repository import (
    FaucetClaimRepositoryProtocol,
)
from guardian_ledger.application.ports.reward_minter import RewardMinterProtocol
from guardian_ledger.application.ports.time_authority import TimeAuthorityProtocol
from guardian_ledger.application.services.ledger_sequencer import LedgerSequencer
from guardian_ledger.config.ledger_config import (
    DEFAULT_LEDGER_CONFIG,
    TOKEN_FAUCET_ADDRESS,
    FaucetConfig,
)
from guardian_ledger.domain.errors import FaucetCooldownError
from guardian_ledger.domain.events import MINT_REASON_FAUCET
from guardian_ledger.domain.models.address import normalize_address
from guardian_ledger.domain.models.token import TransferReceipt

logger = get_logger(__name__)


class TokenFaucetService:
    """Rate-limited token dispenser."""

    def __init__(
        self,
        claims: FaucetClaimRepositoryProtocol,
        minter: RewardMinterProtocol,
        sequencer: LedgerSequencer,
        time_authority: TimeAuthorityProtocol,
        config: FaucetConfig | None = None,
        *,
        faucet_address: str = TOKEN_FAUCET_ADDRESS,
    ) -> None:
        """Initialize the faucet.

        Args:
            claims: Last-claim bookkeeping.
            minter: Token minting.
            sequencer: Ledger transaction sequencer.
            time_authority: Injected clock.
            config: Amount and cooldown. Uses default if not provided.
            faucet_address: Address the faucet mints as.
        """
        self._claims = claims
        self._minter = minter
        self._sequencer = sequencer
        self._time = time_authority
        self._config = config or DEFAULT_LEDGER_CONFIG.faucet
        self._address = normalize_address(faucet_address)

    @property
    def address(self) -> str:
        """Address the faucet mints as."""
        return self._address

    async def claim(self, caller: str) -> TransferReceipt:
        """Mint the faucet amount to caller.

        Raises:
            InvalidAddressError: If caller is malformed.
            FaucetCooldownError: If caller claimed within the cooldown.
        """
        caller = normalize_address(caller)
        log = logger.bind(caller=caller)

        async with self._sequencer.transaction("faucet.claim"):
            now = self._time.now()
            remaining = self._seconds_remaining(await self._claims.get_last_claim(caller), now)
            if remaining > 0:
                log.warning("faucet_claim_rejected_cooldown", retry_after_seconds=remaining)
                raise FaucetCooldownError(caller, remaining)

            await self._claims.record_claim(caller, now)
            receipt = await self._minter.mint(
                self._address,
                caller,
                self._config.amount,
                reason=MINT_REASON_FAUCET,
            )

        log.info("faucet_claimed", amount=str(self._config.amount), tx_ref=receipt.tx_ref)
        return receipt

    async def status(self, address: str) -> FaucetStatus:
        """Return whether address may claim now."""
        address = normalize_address(address)
        last_claim = await self._claims.get_last_claim(address)
        remaining = self._seconds_remaining(last_claim, self._time.now())
        return FaucetStatus(
            address=address,
            can_claim=remaining == 0,
            seconds_remaining=remaining,
            last_claim_at=last_claim,
        )

    def _seconds_remaining(self, last_claim: datetime | None, now: datetime) -> int:
        if last_claim is None:
            return 0
        remaining = (last_claim + self._config.cooldown - now).total_seconds()
        return max(0, math.ceil(remaining))
