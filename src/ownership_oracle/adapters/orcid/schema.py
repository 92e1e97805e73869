"""Pydantic models for the ORCID public API ``researcher-urls`` resource."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OrcidBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class OrcidUrl(OrcidBaseModel):
    value: str | None = None


class ResearcherUrl(OrcidBaseModel):
    url_name: str | None = Field(default=None, alias="url-name")
    url: OrcidUrl | None = None


class ResearcherUrls(OrcidBaseModel):
    researcher_url: list[ResearcherUrl] = Field(
        default_factory=list["ResearcherUrl"], alias="researcher-url"
    )
