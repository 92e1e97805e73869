"""HTTP fetcher resolving owners from ORCID researcher profiles."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from ownership_oracle.adapters.http_resilience import (
    ClientFactory,
    ResilientClient,
    http_get_resilient,
)
from ownership_oracle.config.oracle import build_oracle_config
from ownership_oracle.domain.errors import MalformedResponseError, TransientFetchError
from ownership_oracle.domain.model import Claimed
from ownership_oracle.domain.ports import OwnerSource

from .claims import claimed_owner
from .schema import ResearcherUrls

if TYPE_CHECKING:
    from ownership_oracle.config.http_resilience import ResilienceConfig
    from ownership_oracle.domain.model import ResolvedOwner

log = getLogger(__name__)


def _default_resilience_config() -> ResilienceConfig:
    return build_oracle_config().orcid


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class OrcidClaimFetcher:
    """Resolve owners from ``DRIPS_OWNERSHIP_CLAIM`` researcher URLs.

    ORCID has no equivalent of a missing manifest, so this source never revokes:
    every failure raises and leaves the owner unchanged.
    """

    resilience: ResilienceConfig = field(default_factory=_default_resilience_config)
    client_factory: ClientFactory = field(default=_default_client_factory)

    def __call__(self, url: str, *, network: str) -> ResolvedOwner:
        return asyncio.run(self._fetch_async(url, network=network))

    async def _fetch_async(self, url: str, *, network: str) -> ResolvedOwner:
        profile = await self._fetch_profile(url)
        owner = claimed_owner(profile.researcher_url, network)
        log.info("ORCID profile %s claims %s for %s", url, owner, network)
        return Claimed(owner)

    async def _fetch_profile(self, url: str) -> ResearcherUrls:
        try:
            response = await http_get_resilient(
                self.resilience, url, client_factory=self.client_factory
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.warning("%s fetch failed for %s: %s", self.resilience.name, url, exc)
            raise TransientFetchError(f"Fetching {url} failed: {exc}", url=url) from exc

        if not response.is_success:
            raise TransientFetchError(
                f"ORCID answered {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
            )

        try:
            return ResearcherUrls.model_validate_json(response.content)
        except ValidationError as exc:
            raise MalformedResponseError(f"Unexpected ORCID payload from {url}") from exc


if TYPE_CHECKING:
    _source_check: OwnerSource = OrcidClaimFetcher()
