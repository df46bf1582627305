"""Search request parameters."""

from __future__ import annotations

from pydantic import BaseModel, Field

MAX_PAGE_SIZE = 250


class SearchParams(BaseModel):
    """Query parameters for card and set search endpoints.

    ``order_by`` lists field names; a ``-`` prefix sorts descending.
    """

    query: str | None = None
    page: int | None = Field(default=None, ge=1)
    page_size: int | None = Field(default=None, ge=1, le=MAX_PAGE_SIZE)
    order_by: list[str] | None = None

    def to_query(self) -> dict[str, str | int]:
        """Map to wire parameter names, omitting unset values."""
        params: dict[str, str | int] = {}
        if self.query is not None:
            params["q"] = self.query
        if self.page is not None:
            params["page"] = self.page
        if self.page_size is not None:
            params["pageSize"] = self.page_size
        if self.order_by:
            params["orderBy"] = ",".join(self.order_by)
        return params
