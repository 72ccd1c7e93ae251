"""Listing query parameters shared by every collection endpoint."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query

from src.hrdesk.core.config import get_settings
from src.hrdesk.core.errors import InvalidArgumentError
from src.hrdesk.managers.base import MAX_ROW_OFFSET


@dataclass(frozen=True, slots=True)
class Pagination:
    search: str | None
    page: int | None
    page_limit: int | None


def get_pagination(
    search: Annotated[
        str | None, Query(alias="filter", max_length=200, description="Text search string")
    ] = None,
    page: Annotated[
        int | None, Query(le=MAX_ROW_OFFSET, description="Zero-based page number")
    ] = None,
    page_limit: Annotated[int | None, Query(description="Items per page")] = None,
) -> Pagination:
    """Collect listing parameters. Range checks beyond the upper bound are the managers'."""
    max_page_limit = get_settings().max_page_limit
    if page_limit is not None and page_limit > max_page_limit:
        raise InvalidArgumentError(f"page_limit cannot exceed {max_page_limit}")
    return Pagination(search=search, page=page, page_limit=page_limit)


PageParams = Annotated[Pagination, Depends(get_pagination)]
