"""In-memory ledger arenas.

Each store implements its repository port plus snapshot()/restore() so
that the LedgerSequencer can roll it back when a transaction fails.
"""

from guardian_ledger.infrastructure.adapters.persistence.in_memory_allowlist import (
    InMemoryAllowlist,
)
from guardian_ledger.infrastructure.adapters.persistence.in_memory_faucet_claim_repository import (
    InMemoryFaucetClaimRepository,
)
from guardian_ledger.infrastructure.adapters.persistence.in_memory_report_repository import (
    InMemoryReportRepository,
)
from guardian_ledger.infrastructure.adapters.persistence.in_memory_stake_evidence_repository import (
    InMemoryStakeEvidenceRepository,
)
from guardian_ledger.infrastructure.adapters.persistence.in_memory_token_store import (
    InMemoryTokenStore,
)
from guardian_ledger.infrastructure.adapters.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)

__all__: list[str] = [
    "InMemoryAllowlist",
    "InMemoryFaucetClaimRepository",
    "InMemoryReportRepository",
    "InMemoryStakeEvidenceRepository",
    "InMemoryTokenStore",
    "InMemoryUserRepository",
]
