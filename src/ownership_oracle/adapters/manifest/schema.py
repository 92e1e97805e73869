"""Pydantic models describing ``FUNDING.json`` manifests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class FundingBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NetworkOwnership(FundingBaseModel):
    owned_by: str = Field(alias="ownedBy")


class FundingManifest(FundingBaseModel):
    # entries stay raw so a broken entry for one network cannot hide another
    drips: dict[str, object] = Field(default_factory=dict)

    def owner_for(self, network: str) -> str | None:
        entry = self.drips.get(network)
        if entry is None:
            return None
        try:
            return NetworkOwnership.model_validate(entry).owned_by
        except ValidationError:
            return None


def manifest_owner(payload: object, network: str) -> str | None:
    """Return the raw ``drips.<network>.ownedBy`` value of a decoded manifest, if any."""

    try:
        manifest = FundingManifest.model_validate(payload)
    except ValidationError:
        return None
    return manifest.owner_for(network)
