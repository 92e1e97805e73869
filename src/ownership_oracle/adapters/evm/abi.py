"""ABI decoding of ownership requests and encoding of the owner update call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_utils import (
    decode_hex,
    event_signature_to_log_topic,
    function_signature_to_4byte_selector,
    to_checksum_address,
)

from ownership_oracle.domain.model import OwnershipRequest

if TYPE_CHECKING:
    from ownership_oracle.domain.addresses import Address

    from .schema import EventLog

OWNER_UPDATE_REQUESTED = "OwnerUpdateRequested(uint256,uint8,bytes,address)"
OWNER_UPDATE_REQUESTED_TOPIC = event_signature_to_log_topic(OWNER_UPDATE_REQUESTED)
OWNER_UPDATE_REQUESTED_DATA = ("uint8", "bytes", "address")

UPDATE_OWNER = "updateOwnerByGelato(uint256,address,address)"
UPDATE_OWNER_SELECTOR = function_signature_to_4byte_selector(UPDATE_OWNER)
UPDATE_OWNER_ARGS = ("uint256", "address", "address")

LEGACY_UPDATE_OWNER = "updateOwnerByGelato(uint256,address,uint96,address)"
LEGACY_UPDATE_OWNER_SELECTOR = function_signature_to_4byte_selector(LEGACY_UPDATE_OWNER)
LEGACY_UPDATE_OWNER_ARGS = ("uint256", "address", "uint96", "address")


class EventDecodingError(ValueError):
    """Raised when a log is not a well-formed ``OwnerUpdateRequested`` event."""


def decode_owner_update_requested(log_entry: EventLog, *, chain_id: int) -> OwnershipRequest:
    """Build the ownership request carried by an ``OwnerUpdateRequested`` log.

    ``accountId`` is indexed and read from the second topic; the remaining
    fields are ABI-encoded in the log data.
    """

    try:
        topics = [decode_hex(topic) for topic in log_entry.topics]
        data = decode_hex(log_entry.data)
    except ValueError as exc:
        raise EventDecodingError(f"Log is not hex encoded: {exc}") from exc

    if not topics or topics[0] != OWNER_UPDATE_REQUESTED_TOPIC:
        raise EventDecodingError(f"Log is not an {OWNER_UPDATE_REQUESTED} event")
    if len(topics) != 2 or len(topics[1]) != 32:
        raise EventDecodingError("OwnerUpdateRequested log must carry the account id topic")

    try:
        forge, name, payer = decode(OWNER_UPDATE_REQUESTED_DATA, data)
        source_contract = to_checksum_address(log_entry.address)
    except (DecodingError, ValueError) as exc:
        raise EventDecodingError(f"Malformed OwnerUpdateRequested log: {exc}") from exc

    return OwnershipRequest(
        account_id=int.from_bytes(topics[1], "big"),
        forge=forge,
        name=bytes(name),
        payer=to_checksum_address(payer),
        chain_id=chain_id,
        source_contract=source_contract,
        block_number=log_entry.block_number,
    )


def encode_update_owner(
    request: OwnershipRequest,
    owner: Address,
    *,
    include_from_block: bool = False,
) -> bytes:
    """Encode the ``updateOwnerByGelato`` call recording ``owner`` for the request's account."""

    if not include_from_block:
        arguments = encode(UPDATE_OWNER_ARGS, (request.account_id, owner, request.payer))
        return UPDATE_OWNER_SELECTOR + arguments

    if request.block_number is None:
        raise ValueError("The legacy owner update requires the block number of the request")
    arguments = encode(
        LEGACY_UPDATE_OWNER_ARGS,
        (request.account_id, owner, request.block_number, request.payer),
    )
    return LEGACY_UPDATE_OWNER_SELECTOR + arguments
