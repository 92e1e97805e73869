"""Turn a resolution outcome into an on-chain decision."""

from __future__ import annotations

from .addresses import ZERO_ADDRESS
from .model import Claimed, Decision, ResolvedOwner, Revoked, Skip, Submit


def decide(outcome: ResolvedOwner) -> Decision:
    """Only ``Unchanged`` suppresses execution; a revocation is submitted as the zero address."""

    if isinstance(outcome, Claimed):
        return Submit(outcome.address)
    if isinstance(outcome, Revoked):
        return Submit(ZERO_ADDRESS)
    return Skip(outcome.reason or "Owner could not be determined")
