"""Pydantic model for event logs handed over by the execution host."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventLog(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    address: str
    topics: list[str]
    data: str = "0x"
    block_number: int | None = Field(default=None, alias="blockNumber")

    @field_validator("block_number", mode="before")
    @classmethod
    def _parse_block_number(cls, value: object) -> object:
        # JSON-RPC encodes quantities as hex strings
        if isinstance(value, str):
            return int(value, 16) if value.lower().startswith("0x") else int(value)
        return value
