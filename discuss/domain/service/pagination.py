"""1-based pagination shared by listing operations."""

from dataclasses import dataclass
from math import ceil
from typing import Generic, TypeVar

from discuss.domain.error import ValidationError

MAX_PAGE_SIZE = 100

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of results.

    ``total`` counts every stored item the listing could have returned,
    before any view filtering applied to ``items``.
    """

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.limit)


def page_offset(page: int, limit: int) -> int:
    """Validate 1-based pagination and return the row offset.

    Raises:
        ValidationError: If page or limit is out of range
    """
    if page < 1:
        raise ValidationError("page must be 1 or greater")
    if limit < 1 or limit > MAX_PAGE_SIZE:
        raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
    return (page - 1) * limit
