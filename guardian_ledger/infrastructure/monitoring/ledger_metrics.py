"""Ledger metrics for Prometheus exposition.

The sequencer reports every transaction outcome here. Counters:

- ledger_transactions_total{operation, outcome}: committed / rolled_back
- ledger_rollbacks_total{operation, error_type}: why transactions reverted
- ledger_events_total{event_type}: audit events published
- ledger_tokens_minted_total{reason}: minted supply in whole tokens

Rewards paid can be read from ledger_tokens_minted_total with
reason="reporter_reward" or reason="investigator_reward".
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, generate_latest

from guardian_ledger.application.ports.audit_event_emitter import LedgerEvent
from guardian_ledger.application.ports.ledger_metrics import LedgerMetricsProtocol
from guardian_ledger.domain.events import TokensMintedEvent
from guardian_ledger.domain.models.token import ONE_TOKEN

OUTCOME_COMMITTED = "committed"
OUTCOME_ROLLED_BACK = "rolled_back"

# Content type for the Prometheus text exposition format
METRICS_CONTENT_TYPE = CONTENT_TYPE_LATEST


class LedgerMetricsCollector(LedgerMetricsProtocol):
    """Collects ledger transaction metrics for Prometheus.

    Attributes:
        ledger_transactions_total: Transactions by operation and outcome.
        ledger_rollbacks_total: Rollbacks by operation and error type.
        ledger_events_total: Published audit events by type.
        ledger_tokens_minted_total: Whole tokens minted by reason.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize ledger metrics collector.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")
        self._service_name = os.environ.get("SERVICE_NAME", "guardian-ledger")

        self.ledger_transactions_total = Counter(
            name="ledger_transactions_total",
            documentation="Ledger transactions by operation and outcome",
            labelnames=["operation", "outcome", "service", "environment"],
            registry=self._registry,
        )
        self.ledger_rollbacks_total = Counter(
            name="ledger_rollbacks_total",
            documentation="Rolled back ledger transactions by error type",
            labelnames=["operation", "error_type", "service", "environment"],
            registry=self._registry,
        )
        self.ledger_events_total = Counter(
            name="ledger_events_total",
            documentation="Audit events published by committed transactions",
            labelnames=["event_type", "service", "environment"],
            registry=self._registry,
        )
        self.ledger_tokens_minted_total = Counter(
            name="ledger_tokens_minted_total",
            documentation="Incentive tokens minted, in whole tokens, by reason",
            labelnames=["reason", "service", "environment"],
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """The registry the counters are registered in."""
        return self._registry

    def record_committed(self, operation: str, events: Sequence[LedgerEvent]) -> None:
        """Record a committed transaction and the events it produced.

        Args:
            operation: Outermost operation name.
            events: Events the transaction published, in order.
        """
        self.ledger_transactions_total.labels(
            operation=operation,
            outcome=OUTCOME_COMMITTED,
            service=self._service_name,
            environment=self._environment,
        ).inc()

        for event in events:
            self.ledger_events_total.labels(
                event_type=event.event_type,
                service=self._service_name,
                environment=self._environment,
            ).inc()
            if isinstance(event, TokensMintedEvent):
                self.ledger_tokens_minted_total.labels(
                    reason=event.reason,
                    service=self._service_name,
                    environment=self._environment,
                ).inc(event.amount / ONE_TOKEN)

    def record_rolled_back(self, operation: str, error_type: str) -> None:
        """Record a rolled back transaction.

        Args:
            operation: Outermost operation name.
            error_type: Class name of the exception that aborted it.
        """
        self.ledger_transactions_total.labels(
            operation=operation,
            outcome=OUTCOME_ROLLED_BACK,
            service=self._service_name,
            environment=self._environment,
        ).inc()
        self.ledger_rollbacks_total.labels(
            operation=operation,
            error_type=error_type,
            service=self._service_name,
            environment=self._environment,
        ).inc()

    def generate(self) -> bytes:
        """Render the collector's registry in Prometheus text format."""
        return generate_latest(self._registry)
