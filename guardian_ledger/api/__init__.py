"""API surface: response models and mappers for ledger reads."""
