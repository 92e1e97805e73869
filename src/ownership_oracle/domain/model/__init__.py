"""Domain model for ownership resolution."""

from __future__ import annotations

from .enums import FetchStrategy, Forge
from .outcomes import Claimed, Decision, ResolvedOwner, Revoked, Skip, Submit, Unchanged
from .request import MALFORMED_NAME, OwnershipRequest

__all__ = [
    "MALFORMED_NAME",
    "Claimed",
    "Decision",
    "FetchStrategy",
    "Forge",
    "OwnershipRequest",
    "ResolvedOwner",
    "Revoked",
    "Skip",
    "Submit",
    "Unchanged",
]
