from __future__ import annotations

import asyncio
import logging

import httpx
import pytest

from ownership_oracle.adapters.http_resilience import ResilientClient, http_get_resilient
from ownership_oracle.config import ResilienceConfig, RetryPolicy
from tests.helpers.http_fakes import RecordingHandler, make_client_factory


def _get(handler: RecordingHandler, config: ResilienceConfig) -> httpx.Response:
    return asyncio.run(
        http_get_resilient(
            config, "https://example.com/", client_factory=make_client_factory(handler)
        )
    )


def test_client_error_statuses_are_not_retried(fast_resilience: ResilienceConfig) -> None:
    handler = RecordingHandler([httpx.Response(404)])

    response = _get(handler, fast_resilience)

    assert response.status_code == 404
    assert len(handler.requests) == 1


def test_retry_budget_bounds_attempts() -> None:
    config = ResilienceConfig(
        name="test", retry=RetryPolicy(total=1, backoff_factor=0.0, backoff_jitter=0.0)
    )
    handler = RecordingHandler([httpx.Response(503)])

    response = _get(handler, config)

    assert response.status_code == 503
    assert len(handler.requests) == 2


def test_response_body_is_read_before_returning(fast_resilience: ResilienceConfig) -> None:
    handler = RecordingHandler([httpx.Response(200, content=b"x" * 10_000)])

    response = _get(handler, fast_resilience)

    assert response.is_closed
    assert len(response.content) == 10_000


def test_client_is_an_async_context_manager(fast_resilience: ResilienceConfig) -> None:
    async def run() -> int:
        async with ResilientClient(
            fast_resilience, transport=httpx.MockTransport(lambda _: httpx.Response(204))
        ) as client:
            response = await client.get("https://example.com/")
        return response.status_code

    assert asyncio.run(run()) == 204


def test_requests_are_logged_under_the_config_name(
    fast_resilience: ResilienceConfig, caplog: pytest.LogCaptureFixture
) -> None:
    handler = RecordingHandler([httpx.Response(204)])

    with caplog.at_level(logging.DEBUG, logger="ownership_oracle.adapters.http_resilience"):
        _get(handler, fast_resilience)

    assert "test GET https://example.com/" in caplog.text
