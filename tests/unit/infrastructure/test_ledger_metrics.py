"""Unit tests for LedgerMetricsCollector."""

from __future__ import annotations

import pytest
from prometheus_client import CollectorRegistry

from guardian_ledger.bootstrap import create_guardian_ledger
from guardian_ledger.config.ledger_config import TEST_LEDGER_CONFIG
from guardian_ledger.domain.errors import UnauthorizedError
from guardian_ledger.infrastructure.monitoring import LedgerMetricsCollector
from guardian_ledger.infrastructure.stubs import AuditEventEmitterStub, ContentCipherStub
from tests.helpers import ADMIN, ALICE, MALLORY, FakeTimeAuthority, no_sleep


def _sample(registry: CollectorRegistry, name: str, **labels: str) -> float:
    value = registry.get_sample_value(
        name, {**labels, "service": "guardian-ledger", "environment": "development"}
    )
    return value or 0.0


@pytest.fixture
def registry(monkeypatch: pytest.MonkeyPatch) -> CollectorRegistry:
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("SERVICE_NAME", raising=False)
    return CollectorRegistry()


class TestLedgerMetricsCollector:
    """Tests for transaction outcome counters."""

    @pytest.mark.asyncio
    async def test_commits_rollbacks_and_mints_are_counted(
        self, registry: CollectorRegistry
    ) -> None:
        metrics = LedgerMetricsCollector(registry=registry)
        ledger = await create_guardian_ledger(
            ADMIN,
            TEST_LEDGER_CONFIG,
            time_authority=FakeTimeAuthority(),
            event_emitter=AuditEventEmitterStub(),
            content_cipher=ContentCipherStub(),
            metrics=metrics,
            sleep=no_sleep,
        )

        await ledger.faucet.claim(ALICE)
        with pytest.raises(UnauthorizedError):
            await ledger.token.mint(MALLORY, MALLORY, 1)

        assert (
            _sample(
                registry,
                "ledger_transactions_total",
                operation="faucet.claim",
                outcome="committed",
            )
            == 1.0
        )
        assert (
            _sample(
                registry,
                "ledger_rollbacks_total",
                operation="token.mint",
                error_type="UnauthorizedError",
            )
            == 1.0
        )
        assert _sample(registry, "ledger_tokens_minted_total", reason="faucet") == 100.0
        assert _sample(registry, "ledger_events_total", event_type="token.minted") == 1.0

    def test_generate_renders_text_format(self, registry: CollectorRegistry) -> None:
        metrics = LedgerMetricsCollector(registry=registry)
        metrics.record_rolled_back("report.submit", "VerificationRequiredError")

        assert b"ledger_rollbacks_total" in metrics.generate()
