"""Oracle protocol configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ownership_oracle.domain.model import Forge

from .env import optional_env_var
from .errors import InvalidSettingError
from .http_resilience import ResilienceConfig, RetryPolicy

DEFAULT_USER_AGENT = "ownership-oracle"

CURRENT_TIMEOUT_SECONDS = 4.0
CURRENT_RETRY_TOTAL = 2
LEGACY_TIMEOUT_SECONDS = 25.0
LEGACY_RETRY_TOTAL = 10


class ProtocolVariant(StrEnum):
    """On-chain call contract and fetch budget the oracle speaks."""

    CURRENT = "current"
    LEGACY = "legacy"


@dataclass(frozen=True, slots=True)
class OracleConfig:
    variant: ProtocolVariant
    forges: frozenset[Forge]
    manifest: ResilienceConfig
    orcid: ResilienceConfig

    @property
    def includes_from_block(self) -> bool:
        return self.variant is ProtocolVariant.LEGACY


def build_oracle_config(
    variant: ProtocolVariant = ProtocolVariant.CURRENT,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
) -> OracleConfig:
    headers = {"User-Agent": user_agent}

    if variant is ProtocolVariant.LEGACY:
        manifest = ResilienceConfig(
            name="manifest",
            timeout_seconds=LEGACY_TIMEOUT_SECONDS,
            retry=RetryPolicy(total=LEGACY_RETRY_TOTAL),
            default_headers=headers,
        )
        forges = frozenset({Forge.GITHUB, Forge.GITLAB})
    else:
        manifest = ResilienceConfig(
            name="manifest",
            timeout_seconds=CURRENT_TIMEOUT_SECONDS,
            retry=RetryPolicy(total=CURRENT_RETRY_TOTAL),
            default_headers=headers,
        )
        forges = frozenset(Forge)

    orcid = ResilienceConfig(
        name="orcid",
        timeout_seconds=CURRENT_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=CURRENT_RETRY_TOTAL),
        default_headers={**headers, "Accept": "application/json"},
    )

    return OracleConfig(variant=variant, forges=forges, manifest=manifest, orcid=orcid)


def parse_protocol_variant(value: str) -> ProtocolVariant:
    try:
        return ProtocolVariant(value.strip().lower())
    except ValueError as exc:
        choices = [variant.value for variant in ProtocolVariant]
        raise InvalidSettingError("protocol variant", value, choices) from exc


def get_oracle_config(*, variant: ProtocolVariant | None = None) -> OracleConfig:
    """Build the oracle configuration, reading optional overrides from the environment."""

    if variant is None:
        raw_variant = optional_env_var("ORACLE_PROTOCOL")
        variant = (
            parse_protocol_variant(raw_variant) if raw_variant else ProtocolVariant.CURRENT
        )
    user_agent = optional_env_var("ORACLE_USER_AGENT") or DEFAULT_USER_AGENT
    return build_oracle_config(variant, user_agent=user_agent)
