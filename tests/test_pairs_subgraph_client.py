from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from pool_tags.domain.exceptions import (
    SubgraphGraphQLError,
    SubgraphHttpError,
    SubgraphMissingDataError,
)
from pool_tags.infrastructure.clients.pairs_subgraph_client import (
    PairsSubgraphClient,
    PairsSubgraphClientSettings,
)


ENDPOINT = "https://gateway.example.com/api/key/subgraphs/id/abc"


def _pair_row(pair_id: str, timestamp: int) -> dict:
    return {
        "id": pair_id,
        "timestamp": str(timestamp),
        "token0": {"id": "0xt0", "name": "USD Coin", "symbol": "USDC"},
        "token1": {"id": "0xt1", "name": "Wrapped Ether", "symbol": "WETH"},
    }


def _make_client(handler) -> PairsSubgraphClient:
    return PairsSubgraphClient(
        PairsSubgraphClientSettings(timeout_seconds=5),
        transport=httpx.MockTransport(handler),
    )


def _fetch(client: PairsSubgraphClient, last_timestamp: int = 0):
    return asyncio.run(client.fetch_pairs(endpoint=ENDPOINT, last_timestamp=last_timestamp))


def test_fetch_pairs_sends_graphql_post_and_maps_rows():
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["url"] = str(request.url)
        captured["headers"] = request.headers
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"data": {"pairs": [_pair_row("0xp1", 11), _pair_row("0xp2", 12)]}})

    pairs = _fetch(_make_client(handler), last_timestamp=10)

    assert captured["method"] == "POST"
    assert captured["url"] == ENDPOINT
    assert captured["headers"]["content-type"] == "application/json"
    assert captured["headers"]["accept"] == "application/json"
    assert captured["body"]["variables"] == {"lastTimestamp": 10}
    query = captured["body"]["query"]
    assert "first: 1000" in query
    assert "orderBy: timestamp" in query
    assert "orderDirection: asc" in query
    assert "timestamp_gt: $lastTimestamp" in query

    assert [p.id for p in pairs] == ["0xp1", "0xp2"]
    assert pairs[0].timestamp == 11
    assert pairs[1].token1.symbol == "WETH"


def test_fetch_pairs_returns_empty_page():
    pairs = _fetch(_make_client(lambda request: httpx.Response(200, json={"data": {"pairs": []}})))
    assert pairs == []


def test_fetch_pairs_raises_http_error_on_non_success_status():
    client = _make_client(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(SubgraphHttpError) as exc_info:
        _fetch(client)

    assert exc_info.value.status_code == 503


def test_fetch_pairs_logs_every_graphql_error_before_raising(caplog: pytest.LogCaptureFixture):
    payload = {"errors": [{"message": "first problem"}, {"message": "second problem"}]}
    client = _make_client(lambda request: httpx.Response(200, json=payload))

    with caplog.at_level("WARNING", logger="pool_tags.infrastructure.clients.pairs_subgraph_client"):
        with pytest.raises(SubgraphGraphQLError) as exc_info:
            _fetch(client)

    assert exc_info.value.messages == ["first problem", "second problem"]
    assert "first problem" in caplog.text
    assert "second problem" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": None},
        {"data": {}},
        {"data": {"pairs": None}},
        {"data": {"pairs": [{"id": "0xp1"}]}},
        {"data": {"pairs": [{"id": "0xp1", "timestamp": "1", "token0": None, "token1": None}]}},
    ],
)
def test_fetch_pairs_raises_missing_data_for_unusable_payload(payload: dict):
    client = _make_client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(SubgraphMissingDataError):
        _fetch(client)


def test_fetch_pairs_maps_missing_token_text_to_empty_string():
    row = _pair_row("0xp1", 1)
    row["token0"] = {"id": "0xt0", "name": None, "symbol": "USDC"}
    client = _make_client(lambda request: httpx.Response(200, json={"data": {"pairs": [row]}}))

    pairs = _fetch(client)

    assert pairs[0].token0.name == ""


def test_pairs_query_declares_cursor_as_bigint():
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"data": {"pairs": []}})

    _fetch(_make_client(handler), last_timestamp=1700000000)

    assert "$lastTimestamp: BigInt!" in captured["body"]["query"]
    assert captured["body"]["variables"] == {"lastTimestamp": 1700000000}


@pytest.mark.parametrize(
    "errors",
    [
        "indexer down",
        {"message": "indexer down"},
        ["indexer down"],
    ],
)
def test_fetch_pairs_keeps_whole_message_for_any_errors_shape(errors, caplog: pytest.LogCaptureFixture):
    client = _make_client(lambda request: httpx.Response(200, json={"errors": errors}))

    with caplog.at_level("WARNING", logger="pool_tags.infrastructure.clients.pairs_subgraph_client"):
        with pytest.raises(SubgraphGraphQLError) as exc_info:
            _fetch(client)

    assert exc_info.value.messages == ["indexer down"]
    assert "message=indexer down" in caplog.text
