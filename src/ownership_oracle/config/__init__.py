"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError, InvalidSettingError
from .http_resilience import ResilienceConfig, RetryPolicy
from .oracle import (
    OracleConfig,
    ProtocolVariant,
    build_oracle_config,
    get_oracle_config,
    parse_protocol_variant,
)

__all__ = [
    "ConfigurationError",
    "InvalidSettingError",
    "OracleConfig",
    "ProtocolVariant",
    "ResilienceConfig",
    "RetryPolicy",
    "build_oracle_config",
    "get_oracle_config",
    "optional_env_var",
    "parse_protocol_variant",
]
