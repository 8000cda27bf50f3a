"""
Pytest configuration and shared fixtures for Guardian Ledger tests.

Testing Standards:
- Async tests are marked with pytest.mark.asyncio (auto mode is also enabled)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Time-dependent tests use FakeTimeAuthority, never the wall clock
"""

from __future__ import annotations

import pytest

from guardian_ledger.bootstrap import GuardianLedger, create_guardian_ledger
from guardian_ledger.config.ledger_config import TEST_LEDGER_CONFIG
from guardian_ledger.infrastructure.adapters import AesGcmContentCipher
from guardian_ledger.infrastructure.stubs import AuditEventEmitterStub
from tests.helpers import ADMIN, TEST_CONTENT_KEY, FakeTimeAuthority, no_sleep


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from guardian_ledger import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Provide a frozen clock at 2026-01-01T00:00:00Z."""
    return FakeTimeAuthority()


@pytest.fixture
def audit_emitter() -> AuditEventEmitterStub:
    """Provide a recording audit emitter."""
    return AuditEventEmitterStub()


@pytest.fixture
async def ledger(
    fake_time_authority: FakeTimeAuthority,
    audit_emitter: AuditEventEmitterStub,
) -> GuardianLedger:
    """Provide a fully wired ledger with deterministic collaborators.

    Setup events (minter and oracle grants) are cleared from the emitter.
    """
    guardian_ledger = await create_guardian_ledger(
        ADMIN,
        TEST_LEDGER_CONFIG,
        time_authority=fake_time_authority,
        event_emitter=audit_emitter,
        content_cipher=AesGcmContentCipher(TEST_CONTENT_KEY),
        sleep=no_sleep,
    )
    audit_emitter.clear()
    return guardian_ledger
