"""Infrastructure adapters - production implementations of application ports."""

from guardian_ledger.infrastructure.adapters.aes_gcm_content_cipher import (
    AesGcmContentCipher,
)
from guardian_ledger.infrastructure.adapters.structlog_audit_event_emitter import (
    StructlogAuditEventEmitter,
)
from guardian_ledger.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)
from guardian_ledger.infrastructure.adapters.token_journal_transfer_source import (
    TokenJournalTransferSource,
)

__all__: list[str] = [
    "AesGcmContentCipher",
    "StructlogAuditEventEmitter",
    "SystemTimeAuthority",
    "TokenJournalTransferSource",
]
