"""Resolve the owner of the resource named by an ownership request."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .dispatch import route
from .errors import ResolutionError, UnrecognizedForgeError
from .model import Claimed, FetchStrategy, Forge, OwnershipRequest, Revoked, Unchanged
from .networks import network_slug

if TYPE_CHECKING:
    from collections.abc import Collection

    from .model import ResolvedOwner
    from .ports import OwnerSource

log = getLogger(__name__)

UNCHANGED_MARKER = "<unchanged>"
REVOKED_MARKER = "<revoked>"


@dataclass(frozen=True, slots=True)
class ResolutionReport:
    """Outcome of one resolution together with what is needed to diagnose it."""

    request: OwnershipRequest
    network: str
    outcome: ResolvedOwner
    error: ResolutionError | None = None

    @property
    def owner_label(self) -> str:
        if isinstance(self.outcome, Claimed):
            return self.outcome.address
        if isinstance(self.outcome, Revoked):
            return REVOKED_MARKER
        return UNCHANGED_MARKER

    def log_diagnostics(self) -> None:
        request = self.request
        log.info("Network: %s (chain %s)", self.network, request.chain_id)
        log.info("Forge: %s", request.forge)
        log.info("Name: %r", request.name)
        log.info("Name as UTF-8: %s", request.display_name())
        log.info("Account ID: %s", request.account_id)
        log.info("Owner: %s", self.owner_label)
        log.info("Payer: %s", request.payer)
        if request.block_number is not None:
            log.info("Requested from block: %s", request.block_number)
        if self.error is not None:
            log.info("Error: %s: %s", type(self.error).__name__, self.error)


def resolve_owner(
    request: OwnershipRequest,
    *,
    manifest_source: OwnerSource,
    claim_source: OwnerSource,
    forges: Collection[Forge] = frozenset(Forge),
) -> ResolutionReport:
    """Ask the source selected by the request's forge who owns the named resource.

    Every ``ResolutionError`` is absorbed into an ``Unchanged`` outcome; a bad or
    unreachable off-chain source never fails the invocation.
    """

    network = network_slug(request.chain_id)
    try:
        outcome = _resolve(
            request,
            network=network,
            manifest_source=manifest_source,
            claim_source=claim_source,
            forges=forges,
        )
    except ResolutionError as exc:
        log.warning("Leaving owner of account %s unchanged: %s", request.account_id, exc)
        return ResolutionReport(
            request=request,
            network=network,
            outcome=Unchanged(str(exc)),
            error=exc,
        )
    return ResolutionReport(request=request, network=network, outcome=outcome)


def _resolve(
    request: OwnershipRequest,
    *,
    network: str,
    manifest_source: OwnerSource,
    claim_source: OwnerSource,
    forges: Collection[Forge],
) -> ResolvedOwner:
    # name first: a malformed name must never reach the network
    name = request.decoded_name()
    forge = Forge.from_code(request.forge)
    if forge not in forges:
        raise UnrecognizedForgeError(request.forge)

    target = route(forge, name)
    log.debug("Resolving %s %s via %s", forge.name, name, target.url)
    if target.strategy is FetchStrategy.ORCID_CLAIMS:
        return claim_source(target.url, network=network)
    return manifest_source(target.url, network=network)
