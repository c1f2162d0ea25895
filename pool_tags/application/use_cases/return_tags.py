from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import aclosing
from enum import Enum
import logging

from pool_tags.application.dto.return_tags import ReturnTagsInput, ReturnTagsOutput
from pool_tags.application.ports.pool_pairs_port import PoolPairsPort
from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.entities.pool_pair import PoolPair
from pool_tags.domain.exceptions import PoolTagsError, UnexpectedReturnTagsError
from pool_tags.domain.services.contract_tags import build_contract_tags, filter_valid_pairs


logger = logging.getLogger(__name__)


PAGE_SIZE = 1000


class PaginationState(Enum):
    FETCHING = "fetching"
    DONE = "done"


def _boundary_tie_count(page: list[PoolPair]) -> int:
    last_timestamp = page[-1].timestamp
    return sum(1 for pair in page if pair.timestamp == last_timestamp)


class ReturnTagsUseCase:
    def __init__(self, *, pool_pairs_port: PoolPairsPort, page_size: int = PAGE_SIZE):
        self._pool_pairs_port = pool_pairs_port
        self._page_size = page_size

    async def iter_pair_pages(self, endpoint: str) -> AsyncIterator[list[PoolPair]]:
        """Yield raw pair pages in ascending timestamp order until a short page.

        The cursor advances to the last raw pair of each page, before any
        filtering, so rejected pairs still move the sweep forward.
        """
        state = PaginationState.FETCHING
        cursor = 0
        pages = 0
        while state is PaginationState.FETCHING:
            page = await self._pool_pairs_port.fetch_pairs(endpoint=endpoint, last_timestamp=cursor)
            pages += 1
            yield page

            if len(page) < self._page_size:
                logger.info(
                    "return_tags: pagination_done pages=%s last_page_size=%s cursor=%s",
                    pages,
                    len(page),
                    cursor,
                )
                state = PaginationState.DONE
                continue

            ties = _boundary_tie_count(page)
            if ties > 1:
                # timestamp_gt skips any sibling with this timestamp on the next page
                logger.warning(
                    "return_tags: page_boundary_timestamp_tie page=%s timestamp=%s pairs_at_boundary=%s",
                    pages,
                    page[-1].timestamp,
                    ties,
                )
            cursor = page[-1].timestamp

    async def execute(self, command: ReturnTagsInput) -> ReturnTagsOutput:
        tags: list[ContractTag] = []
        pages = 0
        fetched = 0
        try:
            async with aclosing(self.iter_pair_pages(command.endpoint)) as page_iter:
                async for page in page_iter:
                    pages += 1
                    fetched += len(page)
                    tags.extend(build_contract_tags(command.chain_id, filter_valid_pairs(page)))
        except PoolTagsError:
            raise
        except Exception as exc:
            logger.warning(
                "return_tags: unexpected_failure chain_id=%s pages=%s error=%s",
                command.chain_id,
                pages,
                exc,
            )
            raise UnexpectedReturnTagsError() from exc

        logger.info(
            "return_tags: completed chain_id=%s pages=%s fetched=%s tags=%s",
            command.chain_id,
            pages,
            fetched,
            len(tags),
        )
        return ReturnTagsOutput(
            chain_id=command.chain_id,
            pages=pages,
            fetched_pairs=fetched,
            tags=tags,
        )
