"""Forge dispatch: which source to ask, and where."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from .errors import UnrecognizedForgeError
from .model import FetchStrategy, Forge

if TYPE_CHECKING:
    from collections.abc import Mapping

ORCID_SANDBOX_PREFIX = "sandbox-"
ORCID_HOST = "pub.orcid.org"
ORCID_SANDBOX_HOST = "pub.sandbox.orcid.org"

MANIFEST_URL_TEMPLATES: Mapping[Forge, str] = MappingProxyType(
    {
        Forge.GITHUB: "https://raw.githubusercontent.com/{name}/HEAD/FUNDING.json",
        Forge.GITLAB: "https://gitlab.com/{name}/-/raw/HEAD/FUNDING.json",
        Forge.WEBSITE: "https://{name}/FUNDING.json",
    }
)


@dataclass(frozen=True, slots=True)
class Route:
    strategy: FetchStrategy
    url: str


def route(forge: Forge, name: str) -> Route:
    if forge is Forge.ORCID:
        return Route(FetchStrategy.ORCID_CLAIMS, orcid_researcher_urls(name))

    template = MANIFEST_URL_TEMPLATES.get(forge)
    if template is None:
        raise UnrecognizedForgeError(int(forge))
    return Route(FetchStrategy.MANIFEST, template.format(name=name))


def orcid_researcher_urls(name: str) -> str:
    """Public API endpoint listing the researcher URLs of an ORCID iD.

    A ``sandbox-`` prefix selects the ORCID sandbox registry.
    """

    if name.startswith(ORCID_SANDBOX_PREFIX):
        host = ORCID_SANDBOX_HOST
        orcid_id = name.removeprefix(ORCID_SANDBOX_PREFIX)
    else:
        host = ORCID_HOST
        orcid_id = name
    return f"https://{host}/v3.0/{orcid_id}/researcher-urls"
