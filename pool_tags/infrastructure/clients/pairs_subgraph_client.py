from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

import httpx

from pool_tags.domain.entities.pool_pair import PoolPair
from pool_tags.domain.exceptions import (
    SubgraphGraphQLError,
    SubgraphHttpError,
    SubgraphMissingDataError,
)
from pool_tags.infrastructure.mappers.pool_pair_mapper import map_row_to_pool_pair


logger = logging.getLogger(__name__)


PAIRS_QUERY = """
query PairsAfterTimestamp($lastTimestamp: BigInt!) {
  pairs(
    first: 1000,
    orderBy: timestamp,
    orderDirection: asc,
    where: { timestamp_gt: $lastTimestamp }
  ) {
    id
    timestamp
    token0 {
      id
      name
      symbol
    }
    token1 {
      id
      name
      symbol
    }
  }
}
"""

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        return str(error.get("message", error))
    return str(error)


def _graphql_error_messages(errors: Any) -> list[str]:
    if not errors:
        return []
    if not isinstance(errors, list):
        errors = [errors]
    return [_error_message(error) for error in errors]


@dataclass(frozen=True)
class PairsSubgraphClientSettings:
    timeout_seconds: float


class PairsSubgraphClient:
    def __init__(
        self,
        settings: PairsSubgraphClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    async def fetch_pairs(self, *, endpoint: str, last_timestamp: int) -> list[PoolPair]:
        payload = await self._post_graphql(
            url=endpoint,
            query=PAIRS_QUERY,
            variables={"lastTimestamp": int(last_timestamp)},
        )

        data = payload.get("data")
        rows = data.get("pairs") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise SubgraphMissingDataError("Subgraph response has no pairs data.")

        pairs = [map_row_to_pool_pair(row) for row in rows]
        logger.info(
            "pairs_subgraph_client: fetched_pairs last_timestamp=%s fetched=%s",
            last_timestamp,
            len(pairs),
        )
        return pairs

    async def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        async with httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(
                url,
                headers=REQUEST_HEADERS,
                json={"query": query, "variables": variables},
            )
            if not response.is_success:
                raise SubgraphHttpError(response.status_code)
            payload = response.json()

        if not isinstance(payload, dict):
            raise SubgraphMissingDataError("Subgraph response is not a JSON object.")

        messages = _graphql_error_messages(payload.get("errors"))
        if messages:
            for message in messages:
                logger.warning("pairs_subgraph_client: graphql_error message=%s", message)
            raise SubgraphGraphQLError(messages)

        return payload
