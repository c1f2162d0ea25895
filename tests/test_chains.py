from __future__ import annotations

import pytest

from pool_tags.core.chains import (
    CHAIN_REGISTRY,
    build_chain_registry,
    resolve_subgraph_url,
    supported_chain_ids,
)
from pool_tags.domain.exceptions import UnsupportedChainError


EXPECTED_CHAIN_IDS = ["1", "324", "1101", "8453", "42161", "59144"]


def test_registry_contains_expected_chains_with_distinct_templates():
    assert supported_chain_ids() == EXPECTED_CHAIN_IDS
    templates = list(CHAIN_REGISTRY.values())
    assert len(set(templates)) == len(templates)
    assert all("[api-key]" in template for template in templates)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        CHAIN_REGISTRY["10"] = "https://example.com"  # type: ignore[index]


@pytest.mark.parametrize("chain_id", ["56", "0", "abc", "", "1.0", " 1", "-1"])
def test_resolve_subgraph_url_rejects_unknown_or_non_numeric_chain(chain_id: str):
    with pytest.raises(UnsupportedChainError) as exc_info:
        resolve_subgraph_url(chain_id, "api-key")

    message = str(exc_info.value)
    for valid_id in EXPECTED_CHAIN_IDS:
        assert valid_id in message
    assert exc_info.value.supported == EXPECTED_CHAIN_IDS


def test_resolve_subgraph_url_substitutes_encoded_api_key():
    url = resolve_subgraph_url("8453", "key/with space&more")

    assert "[api-key]" not in url
    assert "/api/key%2Fwith%20space%26more/subgraphs/id/" in url


def test_build_chain_registry_applies_overrides():
    registry = build_chain_registry({"1": "custom-id", "42161": "https://example.com/subgraph/"})

    assert registry["1"].endswith("/[api-key]/subgraphs/id/custom-id")
    assert registry["42161"] == "https://example.com/subgraph"
    assert resolve_subgraph_url("1", "k", registry=registry).endswith("/k/subgraphs/id/custom-id")
