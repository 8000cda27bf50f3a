"""Unit tests for TokenJournalTransferSource."""

from __future__ import annotations

import pytest

from guardian_ledger.bootstrap import GuardianLedger
from guardian_ledger.domain.models.stake import TransferConfirmation
from guardian_ledger.domain.models.token import ONE_TOKEN
from guardian_ledger.infrastructure.adapters import TokenJournalTransferSource
from tests.helpers import ADMIN, ALICE, BOB


@pytest.fixture
async def funded_ledger(ledger: GuardianLedger) -> GuardianLedger:
    await ledger.token.issue_initial_supply(ADMIN, ALICE, 10 * ONE_TOKEN)
    return ledger


class TestTokenJournalTransferSource:
    """Tests for confirmation depth over the token journal."""

    @pytest.mark.asyncio
    async def test_unknown_reference(self, funded_ledger: GuardianLedger) -> None:
        source = TokenJournalTransferSource(funded_ledger.token_store, funded_ledger.sequencer)
        assert await source.get_transfer("nope") is None

    @pytest.mark.asyncio
    async def test_committed_transfer_is_confirmed(self, funded_ledger: GuardianLedger) -> None:
        source = TokenJournalTransferSource(funded_ledger.token_store, funded_ledger.sequencer)
        receipt = await funded_ledger.token.transfer(ALICE, BOB, ONE_TOKEN)

        transfer = await source.get_transfer(receipt.tx_ref)

        assert transfer is not None
        assert transfer.confirmation is TransferConfirmation.CONFIRMED
        assert transfer.confirmations == 1
        assert (transfer.sender, transfer.recipient, transfer.amount) == (ALICE, BOB, ONE_TOKEN)

    @pytest.mark.asyncio
    async def test_depth_grows_with_later_blocks(self, funded_ledger: GuardianLedger) -> None:
        source = TokenJournalTransferSource(
            funded_ledger.token_store, funded_ledger.sequencer, required_confirmations=3
        )
        receipt = await funded_ledger.token.transfer(ALICE, BOB, ONE_TOKEN)

        pending = await source.get_transfer(receipt.tx_ref)
        assert pending is not None
        assert pending.confirmation is TransferConfirmation.PENDING

        await funded_ledger.token.transfer(ALICE, BOB, 1)
        await funded_ledger.token.transfer(ALICE, BOB, 1)

        confirmed = await source.get_transfer(receipt.tx_ref)
        assert confirmed is not None
        assert confirmed.confirmations == 3
        assert confirmed.is_final

    @pytest.mark.asyncio
    async def test_mint_receipt_is_not_a_stake(self, ledger: GuardianLedger) -> None:
        source = TokenJournalTransferSource(ledger.token_store, ledger.sequencer)
        receipt = await ledger.faucet.claim(ALICE)

        transfer = await source.get_transfer(receipt.tx_ref)

        assert transfer is not None
        assert transfer.confirmation is TransferConfirmation.FAILED
