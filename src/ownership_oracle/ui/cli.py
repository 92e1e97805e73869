# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from ownership_oracle.app import resolve_request, run_oracle
from ownership_oracle.common.logging import configure_logging
from ownership_oracle.config import (
    ConfigurationError,
    ProtocolVariant,
    get_oracle_config,
    parse_protocol_variant,
)
from ownership_oracle.domain.addresses import ZERO_ADDRESS, normalize_address
from ownership_oracle.domain.model import Forge, OwnershipRequest

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from ownership_oracle.config import OracleConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve the verified owner of forge resources")
    parser.add_argument(
        "--protocol",
        choices=[variant.value for variant in ProtocolVariant],
        help="On-chain call contract and fetch budget (defaults to ORACLE_PROTOCOL or current)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve the owner of a named resource")
    resolve.add_argument(
        "--forge",
        type=str,
        required=True,
        help="Forge name (github, gitlab, orcid, website) or its numeric code",
    )
    resolve.add_argument(
        "--name",
        type=str,
        required=True,
        help="Resource name, e.g. org/repo, example.com or an ORCID iD",
    )
    resolve.add_argument("--chain-id", type=int, required=True, help="Chain the request targets")
    resolve.add_argument("--account-id", type=int, default=0, help="Account id to update")
    resolve.add_argument("--payer", type=str, default=ZERO_ADDRESS, help="Payer address")
    resolve.add_argument(
        "--contract",
        type=str,
        default=ZERO_ADDRESS,
        help="Address of the contract that emitted the request",
    )
    resolve.add_argument(
        "--block-number",
        type=int,
        help="Block of the request (required by the legacy protocol)",
    )

    event = subparsers.add_parser("event", help="Handle an OwnerUpdateRequested log given as JSON")
    event.add_argument("--chain-id", type=int, required=True, help="Chain the log was emitted on")
    event.add_argument(
        "--file",
        type=Path,
        help="Path to the log JSON (reads standard input when omitted)",
    )

    return parser.parse_args(list(argv))


def _parse_forge(value: str) -> int:
    normalized = value.strip()
    try:
        return Forge[normalized.upper()].value
    except KeyError:
        pass
    try:
        return int(normalized)
    except ValueError as exc:
        raise ValueError(f"Invalid forge: {value}") from exc


def _build_request(args: argparse.Namespace, config: OracleConfig) -> OwnershipRequest:
    if config.includes_from_block and args.block_number is None:
        raise ValueError(f"--block-number is required by the {config.variant} protocol")
    return OwnershipRequest(
        account_id=args.account_id,
        forge=_parse_forge(args.forge),
        name=args.name.encode("utf-8"),
        payer=normalize_address(args.payer),
        chain_id=args.chain_id,
        source_contract=normalize_address(args.contract),
        block_number=args.block_number,
    )


def _read_event(path: Path | None) -> dict[str, object]:
    raw = path.read_text(encoding="utf-8") if path is not None else sys.stdin.read()
    payload = json.loads(raw)
    if not isinstance(payload, dict):
        raise ValueError("Event log must be a JSON object")
    return payload


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO, force=True)

    try:
        variant = parse_protocol_variant(parsed_args.protocol) if parsed_args.protocol else None
        config = get_oracle_config(variant=variant)
        request = _build_request(parsed_args, config) if parsed_args.command == "resolve" else None
        event = _read_event(parsed_args.file) if parsed_args.command == "event" else None
    except (ValueError, ConfigurationError, OSError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if request is not None:
            result = resolve_request(request, config=config)
        elif event is not None:
            result = run_oracle(event, chain_id=parsed_args.chain_id, config=config)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error while resolving ownership")
        sys.exit(1)

    print(json.dumps(result.as_dict(), indent=2))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
