"""Auto-pagination — fetch successive pages until the result set is complete."""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from ptcg_cli.client.envelope import Envelope, resolve
from ptcg_cli.models.query import MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PagePolicy(enum.Enum):
    """Termination rule for a resource kind.

    ``CARDS`` stops on the page count derived from ``totalCount``.
    ``SETS`` also stops on a short page (length not a multiple of the
    page size).
    """

    CARDS = "cards"
    SETS = "sets"


@dataclass
class PageCursor:
    """Mutable paging state for one get-all call."""

    page: int = 1
    page_size: int = MAX_PAGE_SIZE
    total_pages: int = 0

    def observe(self, total_count: int | None) -> None:
        # An absent count keeps the last known page total.
        if total_count is not None:
            self.total_pages = math.ceil(total_count / self.page_size)

    def is_last(self, page_len: int, policy: PagePolicy) -> bool:
        if policy is PagePolicy.SETS and page_len % self.page_size != 0:
            return True
        return self.page >= self.total_pages


def paginate(
    fetch_page: Callable[[int], Envelope[list[T]]],
    policy: PagePolicy,
    *,
    page_size: int = MAX_PAGE_SIZE,
) -> list[T]:
    """Fetch every page and return all entities in page order.

    *fetch_page* takes a 1-based page number and returns the decoded
    envelope for that page. The first error envelope is raised as its
    classified exception; entities from earlier pages are discarded.
    """
    cursor = PageCursor(page_size=page_size)
    items: list[T] = []
    while True:
        envelope = fetch_page(cursor.page)
        page_items = resolve(envelope)
        items.extend(page_items)
        cursor.observe(envelope.total_count)  # type: ignore[union-attr]
        logger.debug(
            "Page %d: %d items (total pages %d)",
            cursor.page, len(page_items), cursor.total_pages,
        )
        if cursor.is_last(len(page_items), policy):
            break
        cursor.page += 1
    logger.info("Fetched %d items across %d page(s)", len(items), cursor.page)
    return items
