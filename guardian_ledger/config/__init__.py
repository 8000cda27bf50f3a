"""Configuration module for Guardian Ledger.

Available Configurations:
- LedgerConfig: Top-level ledger settings (listing limit, initial supply, content key)
- RewardConfig: Reporter and investigator rewards
- StakeConfig: Stake amount, treasury and confirmation polling
- FaucetConfig: Faucet amount and cooldown
"""

from guardian_ledger.config.ledger_config import (
    DEFAULT_LEDGER_CONFIG,
    INCENTIVE_TOKEN_ADDRESS,
    REPORT_LEDGER_ADDRESS,
    STAKE_GATE_ADDRESS,
    TEST_LEDGER_CONFIG,
    TOKEN_FAUCET_ADDRESS,
    FaucetConfig,
    LedgerConfig,
    RewardConfig,
    StakeConfig,
)

__all__ = [
    "DEFAULT_LEDGER_CONFIG",
    "INCENTIVE_TOKEN_ADDRESS",
    "REPORT_LEDGER_ADDRESS",
    "STAKE_GATE_ADDRESS",
    "TEST_LEDGER_CONFIG",
    "TOKEN_FAUCET_ADDRESS",
    "FaucetConfig",
    "LedgerConfig",
    "RewardConfig",
    "StakeConfig",
]
