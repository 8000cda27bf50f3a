"""Ledger application services."""

from guardian_ledger.application.services.identity_registry_service import (
    IdentityRegistryService,
)
from guardian_ledger.application.services.incentive_token_service import (
    IncentiveTokenService,
)
from guardian_ledger.application.services.ledger_sequencer import (
    LedgerSequencer,
    LedgerTransaction,
)
from guardian_ledger.application.services.report_ledger_service import (
    ReportLedgerService,
)
from guardian_ledger.application.services.stake_gate_service import StakeGateService
from guardian_ledger.application.services.token_faucet_service import (
    TokenFaucetService,
)

__all__: list[str] = [
    "IdentityRegistryService",
    "IncentiveTokenService",
    "LedgerSequencer",
    "LedgerTransaction",
    "ReportLedgerService",
    "StakeGateService",
    "TokenFaucetService",
]
