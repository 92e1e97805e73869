"""The ownership request carried by an on-chain event."""

from __future__ import annotations

from dataclasses import dataclass

from ownership_oracle.domain.errors import MalformedNameError

MALFORMED_NAME = "<malformed UTF-8>"


@dataclass(frozen=True, slots=True)
class OwnershipRequest:
    """One ``OwnerUpdateRequested`` event plus the context it was emitted in.

    ``forge`` keeps the raw on-chain code; it is only turned into a ``Forge``
    during resolution so unknown codes surface as a recoverable error.
    """

    account_id: int
    forge: int
    name: bytes
    payer: str
    chain_id: int
    source_contract: str
    block_number: int | None = None

    def decoded_name(self) -> str:
        try:
            return self.name.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedNameError(f"Resource name is not valid UTF-8: {self.name!r}") from exc

    def display_name(self) -> str:
        try:
            return self.decoded_name()
        except MalformedNameError:
            return MALFORMED_NAME
