"""Ledger address helpers.

Addresses are the identity keys of the ledger: users, verifiers, minters
and the component accounts (report ledger, stake gate, faucet, treasury)
are all addressed the same way, as ``0x`` followed by 40 lowercase hex
characters.

Inputs are normalized case-insensitively so that ``0xAbC...`` and
``0xabc...`` address the same account.
"""

from __future__ import annotations

import re

import blake3

from guardian_ledger.domain.errors.validation import InvalidAddressError

ADDRESS_HEX_LENGTH: int = 40

_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-f]{40}$")


def normalize_address(value: object) -> str:
    """Normalize and validate an address.

    Args:
        value: Candidate address.

    Returns:
        The lowercase canonical form.

    Raises:
        InvalidAddressError: If value is not a 0x-prefixed 20-byte hex string.
    """
    if not isinstance(value, str):
        raise InvalidAddressError(value)
    candidate = value.strip().lower()
    if not _ADDRESS_PATTERN.match(candidate):
        raise InvalidAddressError(value)
    return candidate


def is_valid_address(value: object) -> bool:
    """Return True if value normalizes to a valid address."""
    try:
        normalize_address(value)
    except InvalidAddressError:
        return False
    return True


def derive_address(label: str) -> str:
    """Derive a deterministic address from a label.

    Used for component accounts that have no key pair of their own
    (the report ledger, the stake gate, the faucet, the default treasury).

    Args:
        label: Stable, unique label for the account.

    Returns:
        ``0x`` + the first 40 hex characters of BLAKE3(label).
    """
    digest = blake3.blake3(label.encode("utf-8")).hexdigest()
    return "0x" + digest[:ADDRESS_HEX_LENGTH]
