from __future__ import annotations

from typing import Protocol

from pool_tags.domain.entities.pool_pair import PoolPair


class PoolPairsPort(Protocol):
    async def fetch_pairs(self, *, endpoint: str, last_timestamp: int) -> list[PoolPair]:
        ...
