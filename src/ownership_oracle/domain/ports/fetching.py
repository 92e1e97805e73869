"""Ports for asking off-chain sources who owns a resource."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ownership_oracle.domain.model import ResolvedOwner


@runtime_checkable
class OwnerSource(Protocol):
    """Callable port resolving the owner published at ``url`` for ``network``.

    Implementations may raise ``ResolutionError`` subclasses; the resolver turns
    those into an unchanged outcome.
    """

    def __call__(self, url: str, *, network: str) -> ResolvedOwner: ...


__all__ = ["OwnerSource"]
