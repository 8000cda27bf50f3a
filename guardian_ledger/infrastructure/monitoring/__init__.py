"""Monitoring infrastructure: Prometheus ledger metrics."""

from guardian_ledger.infrastructure.monitoring.ledger_metrics import (
    METRICS_CONTENT_TYPE,
    OUTCOME_COMMITTED,
    OUTCOME_ROLLED_BACK,
    LedgerMetricsCollector,
)

__all__: list[str] = [
    "METRICS_CONTENT_TYPE",
    "OUTCOME_COMMITTED",
    "OUTCOME_ROLLED_BACK",
    "LedgerMetricsCollector",
]
