from __future__ import annotations

import logging

from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.entities.pool_pair import PoolPair
from pool_tags.domain.services.token_validation import find_invalid_token_fields


logger = logging.getLogger(__name__)


PROJECT_NAME = "PancakeSwap v2"
UI_WEBSITE_LINK = "https://pancakeswap.finance/"
MAX_SYMBOLS_LENGTH = 45
ELLIPSIS = "..."


def truncate_symbols(text: str, *, max_length: int = MAX_SYMBOLS_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def build_contract_address(chain_id: str, pair_id: str) -> str:
    return f"eip155:{chain_id}:{pair_id}"


def build_public_note(pair: PoolPair) -> str:
    return (
        f"The liquidity pool contract on PancakeSwap v2 for the "
        f"{pair.token0.name} ({pair.token0.symbol}) / "
        f"{pair.token1.name} ({pair.token1.symbol}) pair."
    )


def filter_valid_pairs(pairs: list[PoolPair]) -> list[PoolPair]:
    valid: list[PoolPair] = []
    for pair in pairs:
        rejections = find_invalid_token_fields(pair)
        if not rejections:
            valid.append(pair)
            continue
        for rejection in rejections:
            logger.warning(
                "contract_tags: rejected_pair pair=%s token=%s field=%s value=%r",
                rejection.pair_id,
                rejection.token_slot,
                rejection.field,
                rejection.value,
            )
    return valid


def build_contract_tags(chain_id: str, pairs: list[PoolPair]) -> list[ContractTag]:
    tags: list[ContractTag] = []
    for pair in pairs:
        symbols = truncate_symbols(f"{pair.token0.symbol}/{pair.token1.symbol}")
        tags.append(
            ContractTag(
                contract_address=build_contract_address(chain_id, pair.id),
                public_name_tag=f"{symbols} Pool",
                project_name=PROJECT_NAME,
                ui_website_link=UI_WEBSITE_LINK,
                public_note=build_public_note(pair),
            )
        )
    return tags
