from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    id: str
    name: str
    symbol: str


@dataclass(frozen=True)
class PoolPair:
    id: str
    timestamp: int
    token0: Token
    token1: Token


@dataclass(frozen=True)
class TokenRejection:
    pair_id: str
    token_slot: str
    field: str
    value: str
