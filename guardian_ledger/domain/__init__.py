"""Domain layer for Guardian Ledger.

Pure ledger records, status machines, errors and event payloads. Nothing
here performs I/O or reads the clock.
"""
