"""Shared test helpers."""

from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.ledger_setup import (
    ADMIN,
    ALICE,
    BOB,
    MALLORY,
    TEST_CONTENT_KEY,
    VERIFIER,
    make_verified,
    no_sleep,
)

__all__ = [
    "ADMIN",
    "ALICE",
    "BOB",
    "MALLORY",
    "TEST_CONTENT_KEY",
    "VERIFIER",
    "FakeTimeAuthority",
    "make_verified",
    "no_sleep",
]
