"""HTTP fetcher for ``FUNDING.json`` ownership manifests."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from ownership_oracle.adapters.http_resilience import (
    ClientFactory,
    ResilientClient,
    http_get_resilient,
)
from ownership_oracle.config.oracle import build_oracle_config
from ownership_oracle.domain.addresses import normalize_address
from ownership_oracle.domain.errors import MalformedAddressError, TransientFetchError
from ownership_oracle.domain.model import Claimed, Revoked, Unchanged
from ownership_oracle.domain.ports import OwnerSource

from .schema import manifest_owner

if TYPE_CHECKING:
    from ownership_oracle.config.http_resilience import ResilienceConfig
    from ownership_oracle.domain.model import ResolvedOwner

log = getLogger(__name__)

AUTHORITATIVE_ABSENCE = frozenset({403, 404})


def classify_manifest_response(status_code: int, body: bytes, *, network: str) -> ResolvedOwner:
    """Map a completed manifest response to an ownership outcome.

    ============================  ==============
    response                      outcome
    ============================  ==============
    403, 404                      ``Revoked``
    any other non-2xx             ``Unchanged``
    2xx, body is not JSON         ``Unchanged``
    2xx, no entry for network     ``Revoked``
    2xx, invalid ``ownedBy``      ``Revoked``
    2xx, valid ``ownedBy``        ``Claimed``
    ============================  ==============
    """

    if status_code in AUTHORITATIVE_ABSENCE:
        return Revoked()
    if not httpx.codes.is_success(status_code):
        return Unchanged(f"Unexpected HTTP status {status_code}")

    # ValueError also covers undecodable bytes and integer literals past the conversion limit
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        return Unchanged("Manifest is not valid JSON")

    owner = manifest_owner(payload, network)
    if owner is None:
        return Revoked()
    try:
        return Claimed(normalize_address(owner))
    except MalformedAddressError:
        log.info("Manifest owner for %s is not a valid address: %r", network, owner)
        return Revoked()


def _default_resilience_config() -> ResilienceConfig:
    return build_oracle_config().manifest


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class ManifestFetcher:
    resilience: ResilienceConfig = field(default_factory=_default_resilience_config)
    client_factory: ClientFactory = field(default=_default_client_factory)

    def __call__(self, url: str, *, network: str) -> ResolvedOwner:
        return asyncio.run(self._fetch_async(url, network=network))

    async def _fetch_async(self, url: str, *, network: str) -> ResolvedOwner:
        try:
            response = await http_get_resilient(
                self.resilience, url, client_factory=self.client_factory
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.warning("%s fetch failed for %s: %s", self.resilience.name, url, exc)
            raise TransientFetchError(f"Fetching {url} failed: {exc}", url=url) from exc

        outcome = classify_manifest_response(
            response.status_code, response.content, network=network
        )
        log.info("Manifest %s answered %s: %s", url, response.status_code, outcome)
        return outcome


if TYPE_CHECKING:
    _source_check: OwnerSource = ManifestFetcher()
