"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from eth_utils import encode_hex
from pydantic import ValidationError

from ownership_oracle.adapters.evm import (
    EventDecodingError,
    EventLog,
    decode_owner_update_requested,
    encode_update_owner,
)
from ownership_oracle.adapters.manifest import ManifestFetcher
from ownership_oracle.adapters.orcid import OrcidClaimFetcher
from ownership_oracle.config import OracleConfig, get_oracle_config
from ownership_oracle.domain.model import Skip
from ownership_oracle.domain.policy import decide
from ownership_oracle.domain.resolution import resolve_owner

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ownership_oracle.domain.model import OwnershipRequest
    from ownership_oracle.domain.ports import OwnerSource

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FunctionCall:
    to: str
    data: str

    def as_dict(self) -> dict[str, str]:
        return {"to": self.to, "data": self.data}


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """What the execution host should do: nothing (with a reason) or run ``call_data``."""

    can_exec: bool
    call_data: tuple[FunctionCall, ...] = ()
    message: str | None = None

    def as_dict(self) -> dict[str, object]:
        if not self.can_exec:
            return {"canExec": False, "message": self.message}
        return {"canExec": True, "callData": [call.as_dict() for call in self.call_data]}


def run_oracle(
    log_entry: EventLog | Mapping[str, object],
    *,
    chain_id: int,
    config: OracleConfig | None = None,
    manifest_source: OwnerSource | None = None,
    claim_source: OwnerSource | None = None,
) -> ExecutionResult:
    """Handle one ``OwnerUpdateRequested`` log emitted on ``chain_id``."""

    try:
        event = (
            log_entry if isinstance(log_entry, EventLog) else EventLog.model_validate(log_entry)
        )
    except ValidationError as exc:
        raise EventDecodingError(f"Invalid event log: {exc}") from exc

    request = decode_owner_update_requested(event, chain_id=chain_id)
    return resolve_request(
        request,
        config=config,
        manifest_source=manifest_source,
        claim_source=claim_source,
    )


def resolve_request(
    request: OwnershipRequest,
    *,
    config: OracleConfig | None = None,
    manifest_source: OwnerSource | None = None,
    claim_source: OwnerSource | None = None,
) -> ExecutionResult:
    """Resolve the owner for ``request`` and build the owner update call if one is due."""

    active_config = config or get_oracle_config()
    if active_config.includes_from_block and request.block_number is None:
        raise EventDecodingError(
            f"The {active_config.variant} protocol needs the block number of the request"
        )

    effective_manifest = manifest_source or ManifestFetcher(resilience=active_config.manifest)
    effective_claims = claim_source or OrcidClaimFetcher(resilience=active_config.orcid)

    report = resolve_owner(
        request,
        manifest_source=effective_manifest,
        claim_source=effective_claims,
        forges=active_config.forges,
    )
    report.log_diagnostics()

    decision = decide(report.outcome)
    if isinstance(decision, Skip):
        log.info("No owner update for account %s: %s", request.account_id, decision.reason)
        return ExecutionResult(can_exec=False, message=decision.reason)

    data = encode_update_owner(
        request,
        decision.owner,
        include_from_block=active_config.includes_from_block,
    )
    log.info("Submitting owner %s for account %s", decision.owner, request.account_id)
    call = FunctionCall(to=request.source_contract, data=encode_hex(data))
    return ExecutionResult(can_exec=True, call_data=(call,))
