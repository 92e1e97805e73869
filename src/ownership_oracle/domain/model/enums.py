"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum

from ownership_oracle.domain.errors import UnrecognizedForgeError


class Forge(IntEnum):
    """Hosting platform of a claimed resource, numbered as on-chain."""

    GITHUB = 0
    GITLAB = 1
    ORCID = 2
    WEBSITE = 3

    @classmethod
    def from_code(cls, code: int) -> Forge:
        try:
            return cls(code)
        except ValueError:
            raise UnrecognizedForgeError(code) from None


class FetchStrategy(StrEnum):
    MANIFEST = "manifest"
    ORCID_CLAIMS = "orcid-claims"
