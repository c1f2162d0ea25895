from __future__ import annotations

import re

from pool_tags.domain.entities.pool_pair import PoolPair, TokenRejection


TAG_LIKE_PATTERN = re.compile(r"<[^>]*>?")


def is_valid_text(text: str | None) -> bool:
    if text is None or not text.strip():
        return False
    return TAG_LIKE_PATTERN.search(text) is None


def find_invalid_token_fields(pair: PoolPair) -> list[TokenRejection]:
    rejections: list[TokenRejection] = []
    for slot, token in (("token0", pair.token0), ("token1", pair.token1)):
        for field in ("name", "symbol"):
            value = getattr(token, field)
            if not is_valid_text(value):
                rejections.append(
                    TokenRejection(
                        pair_id=pair.id,
                        token_slot=slot,
                        field=field,
                        value=value,
                    )
                )
    return rejections
