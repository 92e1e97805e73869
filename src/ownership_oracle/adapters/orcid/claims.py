"""Ownership claims published as ORCID researcher URLs.

A researcher claims an account by adding a URL named ``DRIPS_OWNERSHIP_CLAIM``
whose value is ``http://0.0.0.0/`` followed by a query string mapping network
keys to addresses, e.g. ``http://0.0.0.0/?ethereum=0x...&base_sepolia=0x...``.
The sentinel authority keeps the value from being a usable link. Network keys use
underscores because the slugs' hyphens are not allowed there.

The extraction runs as a chain of generators; each stage drops what it cannot
use and only the final step insists on exactly one surviving value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import SplitResult, parse_qsl, urlsplit

from ownership_oracle.domain.addresses import Address, normalize_address
from ownership_oracle.domain.errors import AmbiguousClaimError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .schema import ResearcherUrl

CLAIM_URL_NAME = "DRIPS_OWNERSHIP_CLAIM"
SENTINEL_HOST = "0.0.0.0"  # noqa: S104


def claim_key(network: str) -> str:
    return network.replace("-", "_")


def claim_values(entries: Iterable[ResearcherUrl]) -> Iterator[str]:
    for entry in entries:
        if entry.url_name != CLAIM_URL_NAME or entry.url is None:
            continue
        if entry.url.value is not None:
            yield entry.url.value


def parse_urls(values: Iterable[str]) -> Iterator[SplitResult]:
    for value in values:
        try:
            url = urlsplit(value.strip())
            _ = url.port
        except ValueError:
            continue
        yield url


def sentinel_urls(urls: Iterable[SplitResult]) -> Iterator[SplitResult]:
    for url in urls:
        if (
            url.scheme == "http"
            and url.hostname == SENTINEL_HOST
            and url.username is None
            and url.password is None
            and url.port in (None, 80)
            and url.path in ("", "/")
            and not url.fragment
        ):
            yield url


def network_values(urls: Iterable[SplitResult], key: str) -> Iterator[str]:
    for url in urls:
        for name, value in parse_qsl(url.query, keep_blank_values=True):
            if name == key:
                yield value


def claimed_owner(entries: Iterable[ResearcherUrl], network: str) -> Address:
    """Return the single address a researcher claims for ``network``."""

    urls = sentinel_urls(parse_urls(claim_values(entries)))
    values = list(network_values(urls, claim_key(network)))
    if len(values) != 1:
        raise AmbiguousClaimError(network, len(values))
    return normalize_address(values[0])
