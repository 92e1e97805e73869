"""Account address helpers."""

from __future__ import annotations

from eth_utils import is_address, to_checksum_address

from .errors import MalformedAddressError

type Address = str

ZERO_ADDRESS: Address = "0x0000000000000000000000000000000000000000"


def normalize_address(value: object) -> Address:
    """Return the checksummed form of ``value``.

    Mixed-case input must already carry a valid checksum; all-lower and all-upper
    hex are accepted with or without the ``0x`` prefix.
    """

    if not isinstance(value, str) or not is_address(value):
        raise MalformedAddressError(f"Invalid address: {value!r}")
    return to_checksum_address(value)
