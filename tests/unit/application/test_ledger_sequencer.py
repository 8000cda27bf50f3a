"""Unit tests for LedgerSequencer atomicity and event publication."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pytest

from guardian_ledger.application.services.ledger_sequencer import LedgerSequencer
from guardian_ledger.domain.events import UserRegisteredEvent
from guardian_ledger.domain.models.user import User
from guardian_ledger.infrastructure.adapters.persistence import (
    InMemoryAllowlist,
    InMemoryUserRepository,
)
from guardian_ledger.infrastructure.stubs import AuditEventEmitterStub

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)
ALICE = "0x" + "a1" * 20


class _Boom(Exception):
    pass


class _RecordingMetrics:
    def __init__(self) -> None:
        self.committed: list[tuple[str, int]] = []
        self.rolled_back: list[tuple[str, str]] = []

    def record_committed(self, operation: str, events: object) -> None:
        self.committed.append((operation, len(events)))  # type: ignore[arg-type]

    def record_rolled_back(self, operation: str, error_type: str) -> None:
        self.rolled_back.append((operation, error_type))


def _event() -> UserRegisteredEvent:
    return UserRegisteredEvent(address=ALICE, longevity=1, registered_at=NOW)


@pytest.fixture
def emitter() -> AuditEventEmitterStub:
    return AuditEventEmitterStub()


@pytest.fixture
def metrics() -> _RecordingMetrics:
    return _RecordingMetrics()


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def sequencer(
    emitter: AuditEventEmitterStub,
    metrics: _RecordingMetrics,
    users: InMemoryUserRepository,
) -> LedgerSequencer:
    seq = LedgerSequencer(event_emitter=emitter, metrics=metrics)
    seq.register_store(users)
    return seq


class TestCommit:
    """Tests for committed transactions."""

    @pytest.mark.asyncio
    async def test_commit_publishes_events_at_new_height(
        self, sequencer: LedgerSequencer, emitter: AuditEventEmitterStub
    ) -> None:
        async with sequencer.transaction("test.op") as tx:
            assert tx.height == 1
            tx.record(_event())
            assert emitter.emitted == []

        assert sequencer.block_height == 1
        assert [e.block_height for e in emitter.emitted] == [1]

    @pytest.mark.asyncio
    async def test_commit_reports_metrics(
        self, sequencer: LedgerSequencer, metrics: _RecordingMetrics
    ) -> None:
        async with sequencer.transaction("test.op") as tx:
            tx.record(_event())
            tx.record(_event())
        assert metrics.committed == [("test.op", 2)]

    @pytest.mark.asyncio
    async def test_nested_transaction_joins_outer(
        self, sequencer: LedgerSequencer, emitter: AuditEventEmitterStub
    ) -> None:
        async with sequencer.transaction("outer") as outer:
            async with sequencer.transaction("inner") as inner:
                assert inner is outer
                inner.record(_event())
            assert sequencer.block_height == 0

        assert sequencer.block_height == 1
        assert len(emitter.emitted) == 1

    @pytest.mark.asyncio
    async def test_current_is_cleared_after_commit(self, sequencer: LedgerSequencer) -> None:
        async with sequencer.transaction("test.op") as tx:
            assert sequencer.current is tx
        assert sequencer.current is None
        with pytest.raises(RuntimeError):
            sequencer.require_current()


class TestRollback:
    """Tests for failed transactions."""

    @pytest.mark.asyncio
    async def test_failure_restores_stores_and_drops_events(
        self,
        sequencer: LedgerSequencer,
        users: InMemoryUserRepository,
        emitter: AuditEventEmitterStub,
        metrics: _RecordingMetrics,
    ) -> None:
        with pytest.raises(_Boom):
            async with sequencer.transaction("test.op") as tx:
                await users.save(User(address=ALICE, identifier="x", longevity=0, created_at=NOW))
                tx.record(_event())
                raise _Boom()

        assert await users.get(ALICE) is None
        assert emitter.emitted == []
        assert sequencer.block_height == 0
        assert metrics.rolled_back == [("test.op", "_Boom")]

    @pytest.mark.asyncio
    async def test_inner_failure_reverts_outer_work(
        self, sequencer: LedgerSequencer, users: InMemoryUserRepository
    ) -> None:
        with pytest.raises(_Boom):
            async with sequencer.transaction("outer"):
                await users.save(User(address=ALICE, identifier="x", longevity=0, created_at=NOW))
                async with sequencer.transaction("inner"):
                    raise _Boom()

        assert await users.count() == 0

    @pytest.mark.asyncio
    async def test_allowlist_rolls_back(self, sequencer: LedgerSequencer) -> None:
        allowlist = InMemoryAllowlist("test")
        sequencer.register_store(allowlist)

        with pytest.raises(_Boom):
            async with sequencer.transaction("test.op"):
                await allowlist.add(ALICE)
                raise _Boom()

        assert not await allowlist.contains(ALICE)


class TestSerialization:
    """Tests for the single-writer lock."""

    @pytest.mark.asyncio
    async def test_concurrent_transactions_do_not_interleave(
        self, sequencer: LedgerSequencer
    ) -> None:
        trace: list[str] = []

        async def op(name: str) -> None:
            async with sequencer.transaction(name):
                trace.append(f"{name}:start")
                await asyncio.sleep(0)
                trace.append(f"{name}:end")

        await asyncio.gather(op("a"), op("b"))

        assert trace in (
            ["a:start", "a:end", "b:start", "b:end"],
            ["b:start", "b:end", "a:start", "a:end"],
        )
        assert sequencer.block_height == 2


class TestRegistration:
    """Tests for store registration."""

    def test_rejects_store_without_snapshots(self, sequencer: LedgerSequencer) -> None:
        with pytest.raises(TypeError):
            sequencer.register_store(object())  # type: ignore[arg-type]

    def test_duplicate_registration_is_ignored(
        self, sequencer: LedgerSequencer, users: InMemoryUserRepository
    ) -> None:
        sequencer.register_store(users)
        assert sequencer._stores.count(users) == 1


class _CountingStore:
    """Store that counts how often it is snapshotted and restored."""

    def __init__(self) -> None:
        self.snapshots = 0
        self.restores = 0

    def snapshot(self) -> object:
        self.snapshots += 1
        return None

    def restore(self, snapshot: object) -> None:
        self.restores += 1


class TestSnapshotCost:
    """Each outer transaction snapshots each store exactly once."""

    @pytest.mark.asyncio
    async def test_one_snapshot_per_outer_transaction(self, sequencer: LedgerSequencer) -> None:
        store = _CountingStore()
        sequencer.register_store(store)

        async with sequencer.transaction("outer"):
            async with sequencer.transaction("inner"):
                async with sequencer.transaction("innermost"):
                    pass

        assert store.snapshots == 1
        assert store.restores == 0

    @pytest.mark.asyncio
    async def test_refused_read_still_snapshots_and_restores(
        self, sequencer: LedgerSequencer
    ) -> None:
        store = _CountingStore()
        sequencer.register_store(store)

        with pytest.raises(_Boom):
            async with sequencer.transaction("report.get_content"):
                raise _Boom()

        assert (store.snapshots, store.restores) == (1, 1)
