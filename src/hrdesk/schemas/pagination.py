"""Page-based listing results."""

from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")
R = TypeVar("R")


class QueryPage(BaseModel, Generic[T]):
    """One page of a listing plus the number of rows matching the filter.

    `total` is counted before pagination, so clients can compute the number
    of pages as ceil(total / page_limit).
    """

    items: list[T]
    total: int = Field(ge=0, description="Rows matching the filter before pagination.")

    def map(self, fn: Callable[[T], R]) -> "QueryPage[R]":
        """Return a page with every item converted by `fn`, keeping `total`."""
        return QueryPage[R](items=[fn(item) for item in self.items], total=self.total)
