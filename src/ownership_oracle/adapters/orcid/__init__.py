"""Public interface for the ORCID claim adapter."""

from __future__ import annotations

from .claims import CLAIM_URL_NAME, claim_key, claimed_owner
from .client import OrcidClaimFetcher
from .schema import OrcidUrl, ResearcherUrl, ResearcherUrls

__all__ = [
    "CLAIM_URL_NAME",
    "OrcidClaimFetcher",
    "OrcidUrl",
    "ResearcherUrl",
    "ResearcherUrls",
    "claim_key",
    "claimed_owner",
]
