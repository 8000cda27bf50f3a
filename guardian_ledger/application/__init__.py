"""Application layer for Guardian Ledger.

Ports (the interfaces infrastructure adapters implement), the ledger
services that enforce every access and lifecycle rule, and the result
DTOs those services return.

IMPORT RULES:
- May import from guardian_ledger.domain
- Must not import from guardian_ledger.infrastructure or guardian_ledger.api
"""
