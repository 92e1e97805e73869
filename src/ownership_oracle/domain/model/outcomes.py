"""Resolution outcomes and the decisions derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field

from ownership_oracle.domain.addresses import Address


@dataclass(frozen=True, slots=True)
class Claimed:
    """An authoritative source names ``address`` as the owner."""

    address: Address


@dataclass(frozen=True, slots=True)
class Revoked:
    """An authoritative source exists and claims no owner for this network."""


@dataclass(frozen=True, slots=True)
class Unchanged:
    """No decision could be made; on-chain state must not be touched."""

    reason: str = field(default="", compare=False)


type ResolvedOwner = Claimed | Revoked | Unchanged


@dataclass(frozen=True, slots=True)
class Submit:
    owner: Address


@dataclass(frozen=True, slots=True)
class Skip:
    reason: str = field(default="", compare=False)


type Decision = Submit | Skip
