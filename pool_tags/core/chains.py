from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from urllib.parse import quote

from pool_tags.core.config import get_settings
from pool_tags.domain.exceptions import UnsupportedChainError


API_KEY_PLACEHOLDER = "[api-key]"
GRAPH_GATEWAY_BASE = "https://gateway-arbitrum.network.thegraph.com/api"

# PancakeSwap v2 exchange subgraphs, keyed by EVM chain id.
DEFAULT_SUBGRAPH_IDS = {
    "1": "9opY17WnEPD4REcC43yHycQthSeUMQE26wyoeMjZTLEx",
    "324": "6dU6WwEz22YacyzbTbSa3CECCmaD8G7oQ8aw6MYd5VKU",
    "1101": "37WmH5kBu6QQytRpMwLJMGPRbXvHgpuZsWqswW4Finc2",
    "8453": "2NjL7VNGpn4Vt3TW7TN1EPPQ5wS1NdmJx7zfgSqgTU3K",
    "42161": "EsL7geTRcA3LaLLM9EcMFzYbUgnvf8RixoEEGErrodB3",
    "59144": "6gCTVX98K3A9Hf9zjvgEWL3Xr9ceHu8x1c7vUNLNcmrd",
}


def _build_url_template(subgraph_id: str) -> str:
    if subgraph_id.startswith("http://") or subgraph_id.startswith("https://"):
        return subgraph_id.rstrip("/")
    return f"{GRAPH_GATEWAY_BASE}/{API_KEY_PLACEHOLDER}/subgraphs/id/{subgraph_id}"


def build_chain_registry(overrides: dict | None = None) -> MappingProxyType:
    overrides = overrides or {}
    templates = {}
    for chain_id, subgraph_id in DEFAULT_SUBGRAPH_IDS.items():
        templates[chain_id] = _build_url_template(str(overrides.get(chain_id) or subgraph_id))
    return MappingProxyType(templates)


CHAIN_REGISTRY = build_chain_registry(get_settings().subgraph_id_overrides)


def supported_chain_ids(registry: Mapping[str, str] = CHAIN_REGISTRY) -> list[str]:
    return list(registry.keys())


def resolve_subgraph_url(chain_id: str, api_key: str, *, registry: Mapping[str, str] = CHAIN_REGISTRY) -> str:
    """Resolve the gateway URL for ``chain_id`` with ``api_key`` substituted.

    Raises ``UnsupportedChainError`` (listing every valid id) when the id is
    not numeric or not registered.
    """
    key = str(chain_id)
    if not key.isdigit() or key not in registry:
        raise UnsupportedChainError(key, supported_chain_ids(registry))
    return registry[key].replace(API_KEY_PLACEHOLDER, quote(api_key, safe=""))
