"""Incentive token service.

A fungible balance ledger with an allowlist-gated mint and a receipt
journal. Every mint and transfer gets a UUIDv7 transaction reference and
the block height it committed at; the stake gate reads that journal to
confirm stake payments.

Ledger Invariants:
- total_supply == sum of all balances, always
- Only allowlisted minters increase supply
- Balances never go negative
"""

from __future__ import annotations

from structlog import get_logger
from uuid6 import uuid7

from guardian_ledger.application.ports.allowlist import AllowlistProtocol
from guardian_ledger.application.ports.time_authority import TimeAuthorityProtocol
from guardian_ledger.application.ports.token_store import TokenStoreProtocol
from guardian_ledger.application.services.ledger_sequencer import LedgerSequencer
from guardian_ledger.domain.errors import (
    AdminOnlyError,
    InsufficientBalanceError,
    InvalidAmountError,
    SupplyAlreadyIssuedError,
    UnauthorizedError,
)
from guardian_ledger.domain.events import (
    MINT_REASON_DIRECT,
    MINT_REASON_INITIAL_SUPPLY,
    MinterAllowlistChangedEvent,
    TokensMintedEvent,
    TokensTransferredEvent,
)
from guardian_ledger.domain.models.address import normalize_address
from guardian_ledger.domain.models.token import (
    TokenMetadata,
    TransferKind,
    TransferReceipt,
)

logger = get_logger(__name__)


def _require_positive_amount(amount: object) -> int:
    # bool is an int subclass and never a valid amount
    if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
        raise InvalidAmountError(amount)
    return amount


class IncentiveTokenService:
    """Service for the incentive token ledger.

    Example:
        >>> token = IncentiveTokenService(
        ...     store=store,
        ...     minters=minters,
        ...     sequencer=sequencer,
        ...     time_authority=time_authority,
        ...     admin=admin,
        ...     metadata=metadata,
        ... )
        >>> await token.add_minter(admin, ledger_address)
        >>> await token.mint(ledger_address, reporter, ONE_TOKEN, reason="reporter_reward")
    """

    def __init__(
        self,
        store: TokenStoreProtocol,
        minters: AllowlistProtocol,
        sequencer: LedgerSequencer,
        time_authority: TimeAuthorityProtocol,
        admin: str,
        metadata: TokenMetadata,
    ) -> None:
        """Initialize the token service.

        Args:
            store: Balances, supply and journal.
            minters: Minter allowlist.
            sequencer: Ledger transaction sequencer.
            time_authority: Injected clock.
            admin: Address allowed to manage minters and the initial supply.
            metadata: Token name, symbol, decimals and address.
        """
        self._store = store
        self._minters = minters
        self._sequencer = sequencer
        self._time = time_authority
        self._admin = normalize_address(admin)
        self._metadata = metadata
        self._initial_supply_issued = False

    @property
    def address(self) -> str:
        """Ledger address of the token component."""
        return self._metadata.address

    def metadata(self) -> TokenMetadata:
        """Return the token name, symbol, decimals and address."""
        return self._metadata

    async def balance_of(self, address: str) -> int:
        """Return the balance of address in base units."""
        return await self._store.balance_of(normalize_address(address))

    async def total_supply(self) -> int:
        """Return the total supply in base units."""
        return await self._store.total_supply()

    async def is_minter(self, address: str) -> bool:
        """Return True if address may mint."""
        return await self._minters.contains(normalize_address(address))

    async def get_receipt(self, tx_ref: str) -> TransferReceipt | None:
        """Return the journal entry for tx_ref, or None."""
        return await self._store.get_receipt(tx_ref)

    async def mint(
        self,
        caller: str,
        to: str,
        amount: int,
        *,
        reason: str = MINT_REASON_DIRECT,
    ) -> TransferReceipt:
        """Mint new tokens.

        Args:
            caller: Must be an allowlisted minter.
            to: Recipient address.
            amount: Positive amount in base units.
            reason: Mint reason for the audit trail and metrics.

        Returns:
            The mint receipt.

        Raises:
            InvalidAddressError: If caller or to is malformed.
            InvalidAmountError: If amount is not a positive integer.
            UnauthorizedError: If caller is not an allowlisted minter.
        """
        caller = normalize_address(caller)
        to = normalize_address(to)
        amount = _require_positive_amount(amount)
        log = logger.bind(caller=caller, to=to, amount=str(amount), reason=reason)

        async with self._sequencer.transaction("token.mint"):
            if not await self._minters.contains(caller):
                log.warning("mint_rejected_not_minter")
                raise UnauthorizedError(caller, "mint")
            receipt = await self._credit(caller, to, amount, reason)

        log.info("tokens_minted", tx_ref=receipt.tx_ref)
        return receipt

    async def issue_initial_supply(self, caller: str, to: str, amount: int) -> TransferReceipt:
        """Mint the configured initial supply, once, as the admin.

        Raises:
            AdminOnlyError: If caller is not the admin.
            InvalidAmountError: If amount is not positive.
            SupplyAlreadyIssuedError: If the initial supply was already issued.
        """
        caller = normalize_address(caller)
        to = normalize_address(to)
        amount = _require_positive_amount(amount)

        if caller != self._admin:
            logger.warning("initial_supply_rejected_not_admin", caller=caller)
            raise AdminOnlyError(caller, "issue the initial supply")

        async with self._sequencer.transaction("token.issue_initial_supply"):
            if self._initial_supply_issued:
                logger.warning("initial_supply_rejected_already_issued", caller=caller)
                raise SupplyAlreadyIssuedError(self._metadata.symbol)
            receipt = await self._credit(caller, to, amount, MINT_REASON_INITIAL_SUPPLY)
            # Set only once the mint succeeded; a rollback leaves it unset
            self._initial_supply_issued = True

        logger.info("initial_supply_issued", to=to, amount=str(amount))
        return receipt

    async def transfer(self, caller: str, to: str, amount: int) -> TransferReceipt:
        """Move tokens from caller to another address.

        Args:
            caller: Sender.
            to: Recipient.
            amount: Positive amount in base units.

        Returns:
            The transfer receipt; its tx_ref can be presented as stake.

        Raises:
            InvalidAddressError: If caller or to is malformed.
            InvalidAmountError: If amount is not a positive integer.
            InsufficientBalanceError: If caller's balance is below amount.
        """
        caller = normalize_address(caller)
        to = normalize_address(to)
        amount = _require_positive_amount(amount)
        log = logger.bind(caller=caller, to=to, amount=str(amount))

        async with self._sequencer.transaction("token.transfer") as tx:
            balance = await self._store.balance_of(caller)
            if balance < amount:
                log.warning("transfer_rejected_insufficient_balance", balance=str(balance))
                raise InsufficientBalanceError(caller, balance, amount)

            await self._store.set_balance(caller, balance - amount)
            await self._store.set_balance(to, await self._store.balance_of(to) + amount)
            receipt = TransferReceipt(
                tx_ref=uuid7().hex,
                kind=TransferKind.TRANSFER,
                sender=caller,
                recipient=to,
                amount=amount,
                block_height=tx.height,
            )
            await self._store.append_receipt(receipt)
            tx.record(
                TokensTransferredEvent(
                    tx_ref=receipt.tx_ref,
                    sender=caller,
                    recipient=to,
                    amount=amount,
                )
            )

        log.info("tokens_transferred", tx_ref=receipt.tx_ref)
        return receipt

    async def add_minter(self, caller: str, address: str) -> bool:
        """Allow address to mint (admin only).

        Returns:
            True if the allowlist changed.
        """
        return await self._change_minter(caller, address, added=True)

    async def remove_minter(self, caller: str, address: str) -> bool:
        """Revoke address's mint right (admin only).

        Returns:
            True if the allowlist changed.
        """
        return await self._change_minter(caller, address, added=False)

    async def _change_minter(self, caller: str, address: str, *, added: bool) -> bool:
        caller = normalize_address(caller)
        address = normalize_address(address)
        action = "add minters" if added else "remove minters"
        if caller != self._admin:
            logger.warning("minter_change_rejected_not_admin", caller=caller, minter=address)
            raise AdminOnlyError(caller, action)

        async with self._sequencer.transaction("token.change_minter") as tx:
            if added:
                changed = await self._minters.add(address)
            else:
                changed = await self._minters.remove(address)
            if changed:
                tx.record(
                    MinterAllowlistChangedEvent(
                        minter=address,
                        added=added,
                        changed_by=caller,
                        changed_at=self._time.now(),
                    )
                )

        logger.info("minter_allowlist_changed", minter=address, added=added, changed=changed)
        return changed

    async def _credit(self, minter: str, to: str, amount: int, reason: str) -> TransferReceipt:
        """Mint inside the open transaction, keeping supply equal to balances."""
        tx = self._sequencer.require_current()
        supply = await self._store.total_supply() + amount
        await self._store.set_balance(to, await self._store.balance_of(to) + amount)
        await self._store.set_total_supply(supply)
        receipt = TransferReceipt(
            tx_ref=uuid7().hex,
            kind=TransferKind.MINT,
            sender=None,
            recipient=to,
            amount=amount,
            block_height=tx.height,
        )
        await self._store.append_receipt(receipt)
        tx.record(
            TokensMintedEvent(
                tx_ref=receipt.tx_ref,
                minter=minter,
                recipient=to,
                amount=amount,
                reason=reason,
                total_supply=supply,
            )
        )
        return receipt
