"""Unit tests for token amounts and receipts."""

import pytest

from guardian_ledger.domain.models.token import (
    ONE_TOKEN,
    TransferKind,
    TransferReceipt,
    tokens,
)

RECIPIENT = "0x" + "b0" * 20


class TestTokens:
    """Tests for whole-token to base-unit conversion."""

    def test_int_amounts(self) -> None:
        assert tokens(10) == 10 * 10**18
        assert ONE_TOKEN == 10**18

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0.5", 5 * 10**17),
            ("1", 10**18),
            ("1.000000000000000001", 10**18 + 1),
            (".25", 25 * 10**16),
        ],
    )
    def test_decimal_strings(self, text: str, expected: int) -> None:
        assert tokens(text) == expected

    @pytest.mark.parametrize("text", ["-1", "abc", "1.2.3", "0." + "1" * 19, "1e3"])
    def test_rejects_bad_strings(self, text: str) -> None:
        with pytest.raises(ValueError):
            tokens(text)


class TestTransferReceipt:
    """Tests for receipt validation."""

    def test_mint_has_no_sender(self) -> None:
        with pytest.raises(ValueError):
            TransferReceipt("ref", TransferKind.MINT, RECIPIENT, RECIPIENT, 1)

    def test_transfer_requires_sender(self) -> None:
        with pytest.raises(ValueError):
            TransferReceipt("ref", TransferKind.TRANSFER, None, RECIPIENT, 1)

    def test_amount_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            TransferReceipt("ref", TransferKind.MINT, None, RECIPIENT, 0)
