"""
Guardian Ledger - Confidential Report Lifecycle and Incentive Settlement

An append-only ledger core where verified registrants submit encrypted
reports, allowlisted verifiers investigate them, and token rewards are
settled exactly once to reporters and investigators.

Ledger Truths:
- Every operation commits in full or reverts in full
- Only the reporter and the verifier allowlist may read report content
- Rewards are claimable exactly once
- Nothing is ever deleted
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
