"""Ledger reward, stake, faucet and listing configuration.

This module defines the economic constants of the ledger with environment
variable overrides for deployment tuning. Token amounts are given in whole
tokens (decimal strings such as "0.5" are accepted) and stored in base
units.

Environment Variables:
- LEDGER_REPORTER_REWARD: Reporter reward in tokens (default: 1)
- LEDGER_INVESTIGATOR_REWARD: Investigator reward in tokens (default: 0.5)
- LEDGER_STAKE_AMOUNT: Stake required for verification in tokens (default: 10)
- LEDGER_TREASURY_ADDRESS: Treasury address stakes are paid to
- LEDGER_STAKE_CONFIRMATIONS: Confirmations before a stake is final (default: 1)
- LEDGER_STAKE_POLL_ATTEMPTS: Transfer source polls per verification (default: 5)
- LEDGER_STAKE_POLL_INTERVAL: Seconds between polls (default: 2.0)
- LEDGER_FAUCET_AMOUNT: Tokens per faucet claim (default: 100)
- LEDGER_FAUCET_COOLDOWN_HOURS: Hours between claims (default: 24)
- LEDGER_MAX_LIST_LIMIT: Largest list_by_status limit (default: 100)
- LEDGER_INITIAL_SUPPLY: Tokens issued to the admin at bootstrap (default: 0)
- LEDGER_CONTENT_KEY: Hex-encoded 32-byte master key for report content

Unparseable values fall back to the defaults; values that parse but are
out of range are rejected by __post_init__.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from datetime import timedelta

from guardian_ledger.domain.errors import InvalidAddressError
from guardian_ledger.domain.models.address import derive_address, normalize_address
from guardian_ledger.domain.models.token import ONE_TOKEN, tokens


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_token_env(key: str, default: int) -> int:
    """Get a token amount (in whole tokens) as base units, with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return tokens(value)
    except ValueError:
        return default


def _get_address_env(key: str, default: str) -> str:
    """Get an address environment variable, normalized, with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return normalize_address(value)
    except InvalidAddressError:
        return default


# =============================================================================
# Component accounts
# =============================================================================

REPORT_LEDGER_ADDRESS: str = derive_address("guardian-ledger/report-ledger")
STAKE_GATE_ADDRESS: str = derive_address("guardian-ledger/stake-gate")
TOKEN_FAUCET_ADDRESS: str = derive_address("guardian-ledger/token-faucet")
INCENTIVE_TOKEN_ADDRESS: str = derive_address("guardian-ledger/incentive-token")
DEFAULT_TREASURY_ADDRESS: str = derive_address("guardian-ledger/treasury")

# =============================================================================
# Rewards
# =============================================================================

DEFAULT_REPORTER_REWARD: int = ONE_TOKEN
DEFAULT_INVESTIGATOR_REWARD: int = ONE_TOKEN // 2

# =============================================================================
# Stake
# =============================================================================

DEFAULT_STAKE_AMOUNT: int = 10 * ONE_TOKEN
DEFAULT_STAKE_CONFIRMATIONS: int = 1
DEFAULT_STAKE_POLL_ATTEMPTS: int = 5
DEFAULT_STAKE_POLL_INTERVAL_SECONDS: float = 2.0
MAX_STAKE_POLL_ATTEMPTS: int = 60

# =============================================================================
# Faucet
# =============================================================================

DEFAULT_FAUCET_AMOUNT: int = 100 * ONE_TOKEN
DEFAULT_FAUCET_COOLDOWN_HOURS: int = 24

# =============================================================================
# Ledger
# =============================================================================

DEFAULT_MAX_LIST_LIMIT: int = 100
DEFAULT_TOKEN_NAME: str = "Guardian Token"
DEFAULT_TOKEN_SYMBOL: str = "GUARD"

_CONTENT_KEY_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")


@dataclass(frozen=True)
class RewardConfig:
    """Reward amounts in base units.

    Attributes:
        reporter_reward: Minted to the reporter on claim. Default: 1 token.
        investigator_reward: Minted to the verifier on entering Verified.
            Default: 0.5 token.
    """

    reporter_reward: int = DEFAULT_REPORTER_REWARD
    investigator_reward: int = DEFAULT_INVESTIGATOR_REWARD

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.reporter_reward <= 0:
            raise ValueError(f"reporter_reward must be positive, got {self.reporter_reward}")
        if self.investigator_reward <= 0:
            raise ValueError(
                f"investigator_reward must be positive, got {self.investigator_reward}"
            )

    @classmethod
    def from_environment(cls) -> RewardConfig:
        """Create config from environment variables with defaults."""
        return cls(
            reporter_reward=_get_token_env("LEDGER_REPORTER_REWARD", DEFAULT_REPORTER_REWARD),
            investigator_reward=_get_token_env(
                "LEDGER_INVESTIGATOR_REWARD", DEFAULT_INVESTIGATOR_REWARD
            ),
        )


@dataclass(frozen=True)
class StakeConfig:
    """Stake gate configuration.

    Attributes:
        stake_amount: Minimum transfer to the treasury, in base units.
        treasury_address: Address stakes must be paid to.
        required_confirmations: Depth at which a transfer is final.
        max_poll_attempts: Transfer source polls per verify_stake call
            (1 to 60).
        poll_interval_seconds: Sleep between polls.
    """

    stake_amount: int = DEFAULT_STAKE_AMOUNT
    treasury_address: str = DEFAULT_TREASURY_ADDRESS
    required_confirmations: int = DEFAULT_STAKE_CONFIRMATIONS
    max_poll_attempts: int = DEFAULT_STAKE_POLL_ATTEMPTS
    poll_interval_seconds: float = DEFAULT_STAKE_POLL_INTERVAL_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.stake_amount <= 0:
            raise ValueError(f"stake_amount must be positive, got {self.stake_amount}")
        object.__setattr__(self, "treasury_address", normalize_address(self.treasury_address))
        if self.required_confirmations < 1:
            raise ValueError(
                f"required_confirmations must be at least 1, got {self.required_confirmations}"
            )
        if not 1 <= self.max_poll_attempts <= MAX_STAKE_POLL_ATTEMPTS:
            raise ValueError(
                f"max_poll_attempts must be between 1 and {MAX_STAKE_POLL_ATTEMPTS}, "
                f"got {self.max_poll_attempts}"
            )
        if self.poll_interval_seconds < 0:
            raise ValueError(
                f"poll_interval_seconds must be non-negative, got {self.poll_interval_seconds}"
            )

    @classmethod
    def from_environment(cls) -> StakeConfig:
        """Create config from environment variables with defaults."""
        attempts = _get_int_env("LEDGER_STAKE_POLL_ATTEMPTS", DEFAULT_STAKE_POLL_ATTEMPTS)
        # Clamp to valid range
        attempts = max(1, min(attempts, MAX_STAKE_POLL_ATTEMPTS))
        return cls(
            stake_amount=_get_token_env("LEDGER_STAKE_AMOUNT", DEFAULT_STAKE_AMOUNT),
            treasury_address=_get_address_env(
                "LEDGER_TREASURY_ADDRESS", DEFAULT_TREASURY_ADDRESS
            ),
            required_confirmations=max(
                1, _get_int_env("LEDGER_STAKE_CONFIRMATIONS", DEFAULT_STAKE_CONFIRMATIONS)
            ),
            max_poll_attempts=attempts,
            poll_interval_seconds=max(
                0.0,
                _get_float_env("LEDGER_STAKE_POLL_INTERVAL", DEFAULT_STAKE_POLL_INTERVAL_SECONDS),
            ),
        )


@dataclass(frozen=True)
class FaucetConfig:
    """Token faucet configuration.

    Attributes:
        amount: Tokens minted per claim, in base units. Default: 100 tokens.
        cooldown_hours: Hours an address must wait between claims.
    """

    amount: int = DEFAULT_FAUCET_AMOUNT
    cooldown_hours: int = DEFAULT_FAUCET_COOLDOWN_HOURS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.amount <= 0:
            raise ValueError(f"faucet amount must be positive, got {self.amount}")
        if self.cooldown_hours < 0:
            raise ValueError(f"cooldown_hours must be non-negative, got {self.cooldown_hours}")

    @property
    def cooldown(self) -> timedelta:
        """Cooldown as a timedelta."""
        return timedelta(hours=self.cooldown_hours)

    @classmethod
    def from_environment(cls) -> FaucetConfig:
        """Create config from environment variables with defaults."""
        return cls(
            amount=_get_token_env("LEDGER_FAUCET_AMOUNT", DEFAULT_FAUCET_AMOUNT),
            cooldown_hours=max(
                0, _get_int_env("LEDGER_FAUCET_COOLDOWN_HOURS", DEFAULT_FAUCET_COOLDOWN_HOURS)
            ),
        )


@dataclass(frozen=True)
class LedgerConfig:
    """Top-level ledger configuration.

    Attributes:
        rewards: Reward amounts.
        stake: Stake gate settings.
        faucet: Faucet settings.
        max_list_limit: Largest limit list_by_status accepts.
        initial_supply: Tokens issued to the admin at bootstrap (0 = none).
        token_name: Token display name.
        token_symbol: Token ticker.
        content_key_hex: Hex master key for report content; a random key is
            generated at bootstrap when None.
    """

    rewards: RewardConfig = field(default_factory=RewardConfig)
    stake: StakeConfig = field(default_factory=StakeConfig)
    faucet: FaucetConfig = field(default_factory=FaucetConfig)
    max_list_limit: int = DEFAULT_MAX_LIST_LIMIT
    initial_supply: int = 0
    token_name: str = DEFAULT_TOKEN_NAME
    token_symbol: str = DEFAULT_TOKEN_SYMBOL
    content_key_hex: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_list_limit < 1:
            raise ValueError(f"max_list_limit must be at least 1, got {self.max_list_limit}")
        if self.initial_supply < 0:
            raise ValueError(f"initial_supply must be non-negative, got {self.initial_supply}")
        if not self.token_name.strip() or not self.token_symbol.strip():
            raise ValueError("token_name and token_symbol must not be empty")
        if self.content_key_hex is not None and not _CONTENT_KEY_PATTERN.match(
            self.content_key_hex
        ):
            raise ValueError("content_key_hex must be 64 hex characters (32 bytes)")
        if self.stake.treasury_address in (
            REPORT_LEDGER_ADDRESS,
            STAKE_GATE_ADDRESS,
            TOKEN_FAUCET_ADDRESS,
        ):
            raise ValueError("treasury_address must not be a component account")

    @property
    def content_key(self) -> bytes | None:
        """Master content key as bytes, if configured."""
        if self.content_key_hex is None:
            return None
        return bytes.fromhex(self.content_key_hex)

    @classmethod
    def from_environment(cls) -> LedgerConfig:
        """Create config from environment variables with defaults."""
        content_key = os.environ.get("LEDGER_CONTENT_KEY")
        if content_key is not None and not _CONTENT_KEY_PATTERN.match(content_key):
            content_key = None
        return cls(
            rewards=RewardConfig.from_environment(),
            stake=StakeConfig.from_environment(),
            faucet=FaucetConfig.from_environment(),
            max_list_limit=max(1, _get_int_env("LEDGER_MAX_LIST_LIMIT", DEFAULT_MAX_LIST_LIMIT)),
            initial_supply=max(0, _get_token_env("LEDGER_INITIAL_SUPPLY", 0)),
            content_key_hex=content_key,
        )


# Default production config
DEFAULT_LEDGER_CONFIG = LedgerConfig()

# Testing config: stake polling never sleeps
TEST_LEDGER_CONFIG = LedgerConfig(
    stake=StakeConfig(poll_interval_seconds=0.0, max_poll_attempts=3),
)
