from __future__ import annotations

import httpx

from pool_tags.api.schemas.contract_tag import ContractTagResponse
from pool_tags.application.dto.return_tags import ReturnTagsInput
from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.core.chains import resolve_subgraph_url
from pool_tags.core.config import get_settings
from pool_tags.infrastructure.clients.pairs_subgraph_client import (
    PairsSubgraphClient,
    PairsSubgraphClientSettings,
)


def get_pairs_subgraph_client(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PairsSubgraphClient:
    settings = get_settings()
    return PairsSubgraphClient(
        PairsSubgraphClientSettings(timeout_seconds=settings.graph_request_timeout_seconds),
        transport=transport,
    )


def get_return_tags_use_case(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ReturnTagsUseCase:
    return ReturnTagsUseCase(pool_pairs_port=get_pairs_subgraph_client(transport=transport))


async def return_tags(
    chain_id: str,
    api_key: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[dict]:
    """Fetch every PancakeSwap v2 pair on ``chain_id`` and return its contract tags.

    Each tag is a dict keyed by ``Contract Address``, ``Public Name Tag``,
    ``Project Name``, ``UI/Website Link`` and ``Public Note``.
    """
    endpoint = resolve_subgraph_url(chain_id, api_key)
    use_case = get_return_tags_use_case(transport=transport)
    result = await use_case.execute(ReturnTagsInput(chain_id=str(chain_id), endpoint=endpoint))
    return [ContractTagResponse.from_entity(tag).model_dump(by_alias=True) for tag in result.tags]
