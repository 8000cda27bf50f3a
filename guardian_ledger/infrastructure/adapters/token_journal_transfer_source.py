"""Transfer source backed by the incentive token's receipt journal.

A transfer's confirmation depth is the number of ledger transactions
committed since (and including) the one that wrote its receipt. Mint
receipts are never valid stake and are reported as FAILED.
"""

from __future__ import annotations

from structlog import get_logger

from guardian_ledger.application.ports.token_store import TokenStoreProtocol
from guardian_ledger.application.ports.transfer_source import TransferSourceProtocol
from guardian_ledger.application.services.ledger_sequencer import LedgerSequencer
from guardian_ledger.domain.models.stake import StakeTransfer, TransferConfirmation
from guardian_ledger.domain.models.token import TransferKind

logger = get_logger(__name__)


class TokenJournalTransferSource(TransferSourceProtocol):
    """TransferSourceProtocol over the token journal.

    Attributes:
        required_confirmations: Depth at which a transfer is CONFIRMED.
    """

    def __init__(
        self,
        store: TokenStoreProtocol,
        sequencer: LedgerSequencer,
        required_confirmations: int = 1,
    ) -> None:
        """Initialize the transfer source.

        Args:
            store: Token store holding the receipt journal.
            sequencer: Source of the current block height.
            required_confirmations: Depth at which a transfer is final.
        """
        self._store = store
        self._sequencer = sequencer
        self.required_confirmations = required_confirmations

    async def get_transfer(self, tx_ref: str) -> StakeTransfer | None:
        """Look up a journal entry by reference.

        Returns:
            The transfer, or None if the journal has no such reference.
        """
        receipt = await self._store.get_receipt(tx_ref)
        if receipt is None:
            return None

        if receipt.kind is not TransferKind.TRANSFER or receipt.sender is None:
            logger.debug("transfer_source_mint_receipt", tx_ref=tx_ref)
            return StakeTransfer(
                tx_ref=tx_ref,
                sender="",
                recipient=receipt.recipient,
                amount=receipt.amount,
                confirmation=TransferConfirmation.FAILED,
            )

        depth = max(0, self._sequencer.block_height - receipt.block_height + 1)
        confirmation = (
            TransferConfirmation.CONFIRMED
            if depth >= self.required_confirmations
            else TransferConfirmation.PENDING
        )
        return StakeTransfer(
            tx_ref=tx_ref,
            sender=receipt.sender,
            recipient=receipt.recipient,
            amount=receipt.amount,
            confirmation=confirmation,
            confirmations=depth,
        )
