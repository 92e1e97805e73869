from __future__ import annotations

import logging

import httpx
import pytest

from ownership_oracle.adapters.manifest import ManifestFetcher
from ownership_oracle.config import ResilienceConfig
from ownership_oracle.domain.errors import TransientFetchError
from ownership_oracle.domain.model import Claimed, Revoked, Unchanged
from tests.helpers.http_fakes import ADDRESS, RecordingHandler, json_response, make_client_factory

URL = "https://raw.githubusercontent.com/org/repo/HEAD/FUNDING.json"


def _fetcher(handler: RecordingHandler, resilience: ResilienceConfig) -> ManifestFetcher:
    return ManifestFetcher(resilience=resilience, client_factory=make_client_factory(handler))


def test_fetch_claimed_owner(fast_resilience: ResilienceConfig) -> None:
    handler = RecordingHandler(
        [json_response(200, {"drips": {"ethereum": {"ownedBy": ADDRESS.lower()}}})]
    )

    outcome = _fetcher(handler, fast_resilience)(URL, network="ethereum")

    assert outcome == Claimed(ADDRESS)
    assert len(handler.requests) == 1
    assert handler.requests[0].method == "GET"
    assert str(handler.requests[0].url) == URL


def test_fetch_not_found_revokes(fast_resilience: ResilienceConfig) -> None:
    handler = RecordingHandler([httpx.Response(404, text="404: Not Found")])

    outcome = _fetcher(handler, fast_resilience)(URL, network="ethereum")

    assert outcome == Revoked()
    assert len(handler.requests) == 1


def test_fetch_server_error_is_retried_then_unchanged(fast_resilience: ResilienceConfig) -> None:
    handler = RecordingHandler([httpx.Response(500)])

    outcome = _fetcher(handler, fast_resilience)(URL, network="ethereum")

    assert isinstance(outcome, Unchanged)
    assert len(handler.requests) > 1


def test_fetch_recovers_after_transient_failure(fast_resilience: ResilienceConfig) -> None:
    handler = RecordingHandler(
        [
            httpx.ConnectError("connection refused"),
            json_response(200, {"drips": {"ethereum": {"ownedBy": ADDRESS}}}),
        ]
    )

    outcome = _fetcher(handler, fast_resilience)(URL, network="ethereum")

    assert outcome == Claimed(ADDRESS)
    assert len(handler.requests) == 2


def test_fetch_exhausted_transport_failures_raise(
    fast_resilience: ResilienceConfig, caplog: pytest.LogCaptureFixture
) -> None:
    handler = RecordingHandler([httpx.ReadTimeout("timed out")])

    with (
        caplog.at_level(logging.WARNING, logger="ownership_oracle.adapters.manifest.client"),
        pytest.raises(TransientFetchError) as exc,
    ):
        _fetcher(handler, fast_resilience)(URL, network="ethereum")

    assert exc.value.url == URL
    assert len(handler.requests) > 1
    assert f"test fetch failed for {URL}" in caplog.text


def test_fetch_is_deterministic_for_a_fixed_response(fast_resilience: ResilienceConfig) -> None:
    handler = RecordingHandler([json_response(200, {"drips": {"ethereum": {"ownedBy": ADDRESS}}})])
    fetcher = _fetcher(handler, fast_resilience)

    assert fetcher(URL, network="ethereum") == fetcher(URL, network="ethereum")


def test_fetch_sends_configured_headers(fast_resilience: ResilienceConfig) -> None:
    resilience = ResilienceConfig(
        name="manifest",
        retry=fast_resilience.retry,
        default_headers={"User-Agent": "ownership-oracle-tests"},
    )
    handler = RecordingHandler([httpx.Response(404)])

    _fetcher(handler, resilience)(URL, network="ethereum")

    assert handler.requests[0].headers["User-Agent"] == "ownership-oracle-tests"
