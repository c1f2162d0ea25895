from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pool_tags.domain.entities.pool_pair import PoolPair, Token
from pool_tags.domain.exceptions import SubgraphMissingDataError


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def map_row_to_token(row: Any, *, pair_id: str, slot: str) -> Token:
    if not isinstance(row, Mapping) or row.get("id") is None:
        raise SubgraphMissingDataError(f"Pair {pair_id} is missing {slot} data.")
    return Token(id=str(row["id"]), name=_text(row.get("name")), symbol=_text(row.get("symbol")))


def map_row_to_pool_pair(row: Any) -> PoolPair:
    if not isinstance(row, Mapping):
        raise SubgraphMissingDataError("Pair row is not an object.")
    pair_id = row.get("id")
    timestamp = row.get("timestamp")
    if pair_id is None or timestamp is None:
        raise SubgraphMissingDataError("Pair row is missing id or timestamp.")
    pair_id = str(pair_id)
    try:
        timestamp_value = int(timestamp)
    except (TypeError, ValueError) as exc:
        raise SubgraphMissingDataError(f"Pair {pair_id} has invalid timestamp: {timestamp!r}") from exc
    return PoolPair(
        id=pair_id,
        timestamp=timestamp_value,
        token0=map_row_to_token(row.get("token0"), pair_id=pair_id, slot="token0"),
        token1=map_row_to_token(row.get("token1"), pair_id=pair_id, slot="token1"),
    )
