"""Composition root for a Guardian Ledger instance.

create_guardian_ledger() builds every store, the shared sequencer and the
four ledger components, then performs the one-time admin setup a fresh
deployment needs:

- the report ledger and the faucet become token minters
- the stake gate becomes an identity oracle
- the configured initial supply (if any) is minted to the admin

Every collaborator with side effects outside the ledger (clock, audit
sink, content cipher, transfer source, metrics, sleep) can be injected;
otherwise the production adapter is used.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace

from structlog import get_logger

from guardian_ledger.application.dtos.ledger import LedgerStats
from guardian_ledger.application.ports.audit_event_emitter import (
    AuditEventEmitterProtocol,
)
from guardian_ledger.application.ports.content_cipher import ContentCipherProtocol
from guardian_ledger.application.ports.ledger_metrics import LedgerMetricsProtocol
from guardian_ledger.application.ports.time_authority import TimeAuthorityProtocol
from guardian_ledger.application.ports.transfer_source import TransferSourceProtocol
from guardian_ledger.application.services import (
    IdentityRegistryService,
    IncentiveTokenService,
    LedgerSequencer,
    ReportLedgerService,
    StakeGateService,
    TokenFaucetService,
)
from guardian_ledger.application.services.stake_gate_service import SleepFn
from guardian_ledger.config.ledger_config import (
    DEFAULT_LEDGER_CONFIG,
    INCENTIVE_TOKEN_ADDRESS,
    LedgerConfig,
)
from guardian_ledger.domain.models.address import normalize_address
from guardian_ledger.domain.models.token import TOKEN_DECIMALS, TokenMetadata
from guardian_ledger.infrastructure.adapters import (
    AesGcmContentCipher,
    StructlogAuditEventEmitter,
    SystemTimeAuthority,
    TokenJournalTransferSource,
)
from guardian_ledger.infrastructure.adapters.persistence import (
    InMemoryAllowlist,
    InMemoryFaucetClaimRepository,
    InMemoryReportRepository,
    InMemoryStakeEvidenceRepository,
    InMemoryTokenStore,
    InMemoryUserRepository,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class GuardianLedger:
    """A wired ledger: one sequencer shared by every component."""

    admin: str
    config: LedgerConfig
    sequencer: LedgerSequencer
    token: IncentiveTokenService
    identity: IdentityRegistryService
    stake_gate: StakeGateService
    reports: ReportLedgerService
    faucet: TokenFaucetService
    token_store: InMemoryTokenStore

    async def stats(self) -> LedgerStats:
        """Return ledger-wide counters."""
        stats = await self.reports.stats(total_users=await self.identity.total_users())
        return replace(stats, total_supply=await self.token.total_supply())


async def create_guardian_ledger(
    admin: str,
    config: LedgerConfig | None = None,
    *,
    time_authority: TimeAuthorityProtocol | None = None,
    event_emitter: AuditEventEmitterProtocol | None = None,
    content_cipher: ContentCipherProtocol | None = None,
    transfer_source: TransferSourceProtocol | None = None,
    metrics: LedgerMetricsProtocol | None = None,
    sleep: SleepFn | None = None,
) -> GuardianLedger:
    """Build and initialize a Guardian Ledger.

    Args:
        admin: Address administering all four components.
        config: Ledger settings. Uses default if not provided.
        time_authority: Clock. Defaults to SystemTimeAuthority.
        event_emitter: Audit sink. Defaults to StructlogAuditEventEmitter.
        content_cipher: Report cipher. Defaults to AES-GCM under the
            configured content key, or an ephemeral key if none is set.
        transfer_source: Stake transfer lookups. Defaults to the ledger's
            own token journal.
        metrics: Transaction metrics collector, if any.
        sleep: Awaitable sleep used by stake polling.

    Returns:
        The wired GuardianLedger.
    """
    admin = normalize_address(admin)
    config = config or DEFAULT_LEDGER_CONFIG
    time_authority = time_authority or SystemTimeAuthority()
    sequencer = LedgerSequencer(
        event_emitter=event_emitter or StructlogAuditEventEmitter(),
        metrics=metrics,
    )

    if content_cipher is None:
        key = config.content_key
        content_cipher = (
            AesGcmContentCipher(key) if key is not None else AesGcmContentCipher.with_random_key()
        )

    token_store = InMemoryTokenStore()
    minters = InMemoryAllowlist("minters")
    users = InMemoryUserRepository()
    oracles = InMemoryAllowlist("oracles")
    evidence = InMemoryStakeEvidenceRepository()
    reports = InMemoryReportRepository()
    verifiers = InMemoryAllowlist("verifiers")
    faucet_claims = InMemoryFaucetClaimRepository()
    for store in (
        token_store,
        minters,
        users,
        oracles,
        evidence,
        reports,
        verifiers,
        faucet_claims,
    ):
        sequencer.register_store(store)

    token = IncentiveTokenService(
        store=token_store,
        minters=minters,
        sequencer=sequencer,
        time_authority=time_authority,
        admin=admin,
        metadata=TokenMetadata(
            name=config.token_name,
            symbol=config.token_symbol,
            decimals=TOKEN_DECIMALS,
            address=INCENTIVE_TOKEN_ADDRESS,
        ),
    )
    identity = IdentityRegistryService(
        users=users,
        oracles=oracles,
        sequencer=sequencer,
        time_authority=time_authority,
        admin=admin,
    )
    stake_gate = StakeGateService(
        transfer_source=transfer_source
        or TokenJournalTransferSource(
            store=token_store,
            sequencer=sequencer,
            required_confirmations=config.stake.required_confirmations,
        ),
        evidence=evidence,
        identity=identity,
        sequencer=sequencer,
        time_authority=time_authority,
        config=config.stake,
        sleep=sleep or asyncio.sleep,
    )
    report_ledger = ReportLedgerService(
        reports=reports,
        verifiers=verifiers,
        identity=identity,
        minter=token,
        cipher=content_cipher,
        sequencer=sequencer,
        time_authority=time_authority,
        admin=admin,
        rewards=config.rewards,
        max_list_limit=config.max_list_limit,
    )
    faucet = TokenFaucetService(
        claims=faucet_claims,
        minter=token,
        sequencer=sequencer,
        time_authority=time_authority,
        config=config.faucet,
    )

    await token.add_minter(admin, report_ledger.address)
    await token.add_minter(admin, faucet.address)
    await identity.add_oracle(admin, stake_gate.address)
    if config.initial_supply > 0:
        await token.issue_initial_supply(admin, admin, config.initial_supply)

    logger.info(
        "guardian_ledger_created",
        admin=admin,
        block_height=sequencer.block_height,
        initial_supply=str(config.initial_supply),
    )
    return GuardianLedger(
        admin=admin,
        config=config,
        sequencer=sequencer,
        token=token,
        identity=identity,
        stake_gate=stake_gate,
        reports=report_ledger,
        faucet=faucet,
        token_store=token_store,
    )
