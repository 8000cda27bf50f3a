"""API adapters for transforming ledger results into API responses."""

from guardian_ledger.api.adapters.ledger_mapper import LedgerResponseMapper

__all__: list[str] = ["LedgerResponseMapper"]
