"""EVM boundary: event logs in, owner update call data out."""

from __future__ import annotations

from .abi import (
    OWNER_UPDATE_REQUESTED,
    OWNER_UPDATE_REQUESTED_TOPIC,
    EventDecodingError,
    decode_owner_update_requested,
    encode_update_owner,
)
from .schema import EventLog

__all__ = [
    "OWNER_UPDATE_REQUESTED",
    "OWNER_UPDATE_REQUESTED_TOPIC",
    "EventDecodingError",
    "EventLog",
    "decode_owner_update_requested",
    "encode_update_owner",
]
