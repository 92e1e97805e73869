from __future__ import annotations

import pytest

from ownership_oracle.config import (
    OracleConfig,
    ProtocolVariant,
    ResilienceConfig,
    RetryPolicy,
    build_oracle_config,
)


@pytest.fixture
def fast_retry() -> RetryPolicy:
    return RetryPolicy(total=2, backoff_factor=0.0, backoff_jitter=0.0)


@pytest.fixture
def fast_resilience(fast_retry: RetryPolicy) -> ResilienceConfig:
    return ResilienceConfig(name="test", timeout_seconds=1.0, retry=fast_retry)


@pytest.fixture
def oracle_config() -> OracleConfig:
    return build_oracle_config(ProtocolVariant.CURRENT)


@pytest.fixture(autouse=True)
def _clear_oracle_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ORACLE_PROTOCOL", raising=False)
    monkeypatch.delenv("ORACLE_USER_AGENT", raising=False)
