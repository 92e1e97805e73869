"""Public interface for the ``FUNDING.json`` manifest adapter."""

from __future__ import annotations

from .client import ManifestFetcher, classify_manifest_response
from .schema import FundingManifest, manifest_owner

__all__ = [
    "FundingManifest",
    "ManifestFetcher",
    "classify_manifest_response",
    "manifest_owner",
]
