"""Scriptable transfer source for testing the stake gate.

Each reference can be given a sequence of answers, returned one per poll;
the last answer repeats. This lets tests walk a transfer from unknown to
pending to confirmed, or make the source unavailable for a while.

WARNING: This stub is NOT for production use.
"""

from __future__ import annotations

from guardian_ledger.application.ports.transfer_source import TransferSourceProtocol
from guardian_ledger.domain.errors import TransferSourceUnavailableError
from guardian_ledger.domain.models.stake import StakeTransfer

# Marker answer: raise TransferSourceUnavailableError for this poll
UNAVAILABLE = object()


class TransferSourceStub(TransferSourceProtocol):
    """Scripted implementation of TransferSourceProtocol.

    Usage:
        source = TransferSourceStub()
        source.script("ref", None, pending_transfer, confirmed_transfer)
        # polls 1, 2, 3+ return None, pending, confirmed
    """

    def __init__(self) -> None:
        """Initialize with no scripted references."""
        self._scripts: dict[str, list[object]] = {}
        self.poll_counts: dict[str, int] = {}

    def script(self, tx_ref: str, *answers: StakeTransfer | None | object) -> None:
        """Set the answers for tx_ref, one per poll (the last repeats)."""
        self._scripts[tx_ref] = list(answers)

    def set_transfer(self, transfer: StakeTransfer) -> None:
        """Answer every poll for transfer.tx_ref with transfer."""
        self._scripts[transfer.tx_ref] = [transfer]

    async def get_transfer(self, tx_ref: str) -> StakeTransfer | None:
        """Return the next scripted answer for tx_ref."""
        poll = self.poll_counts.get(tx_ref, 0)
        self.poll_counts[tx_ref] = poll + 1

        answers = self._scripts.get(tx_ref)
        if not answers:
            return None
        answer = answers[min(poll, len(answers) - 1)]
        if answer is UNAVAILABLE:
            raise TransferSourceUnavailableError(tx_ref, "Simulated outage")
        assert answer is None or isinstance(answer, StakeTransfer)
        return answer

    def clear(self) -> None:
        """Clear scripts and poll counts (for testing)."""
        self._scripts.clear()
        self.poll_counts.clear()
