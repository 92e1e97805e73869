"""Chain identifiers and the network slugs used in funding manifests."""

from __future__ import annotations

from types import MappingProxyType

FALLBACK_NETWORK = "other"

NETWORK_SLUGS = MappingProxyType(
    {
        1: "ethereum",
        11155111: "sepolia",
        10: "optimism",
        11155420: "optimism-sepolia",
        56: "bsc",
        97: "bsc-testnet",
        137: "polygon",
        80002: "amoy",
        100: "gnosis",
        10200: "chiado",
        314: "filecoin",
        314159: "calibration",
        1101: "polygon-zkevm",
        2442: "cardona",
        1088: "metis",
        59902: "metis-sepolia",
        1284: "moonbeam",
        1285: "moonriver",
        3776: "astar-zkevm",
        6038361: "zkyoto",
        8453: "base",
        84532: "base-sepolia",
        34443: "mode",
        919: "mode-sepolia",
        42161: "arbitrum",
        421614: "arbitrum-sepolia",
        59144: "linea",
        59141: "linea-sepolia",
        81457: "blast",
        168587773: "blast-sepolia",
    }
)


def network_slug(chain_id: int) -> str:
    """Return the manifest key for ``chain_id``; unknown chains map to ``"other"``."""

    return NETWORK_SLUGS.get(chain_id, FALLBACK_NETWORK)
