"""Infrastructure stubs for testing.

Available stubs:
- AuditEventEmitterStub: Records committed events with their block height
- TransferSourceStub: Scripted transfer lookups for the stake gate
- ContentCipherStub: Call-counting cipher for content gate tests

WARNING: These stubs are NOT for production use.
Production implementations are in guardian_ledger/infrastructure/adapters/.
"""

from guardian_ledger.infrastructure.stubs.audit_event_emitter_stub import (
    AuditEventEmitterStub,
    EmittedEvent,
)
from guardian_ledger.infrastructure.stubs.content_cipher_stub import ContentCipherStub
from guardian_ledger.infrastructure.stubs.transfer_source_stub import (
    UNAVAILABLE,
    TransferSourceStub,
)

__all__: list[str] = [
    "UNAVAILABLE",
    "AuditEventEmitterStub",
    "ContentCipherStub",
    "EmittedEvent",
    "TransferSourceStub",
]
