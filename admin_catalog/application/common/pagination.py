"""
Pagination types for list queries.

Pages are 0-indexed: page 0 is the first page.

Example:
    class ListCategoriesUseCase:
        def execute(self, query: SearchQuery) -> Pagination[CategoryListOutput]:
            return self.category_gateway.find_all(query).map(CategoryListOutput.from_entity)
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .query import Query

T = TypeVar("T")
U = TypeVar("U")

# Maximum allowed page size
MAX_PER_PAGE = 100


@dataclass(frozen=True)
class SearchQuery(Query):
    """
    Search, sort and paging parameters for list queries.

    Attributes:
        page: Page number (0-indexed)
        per_page: Number of items per page
        terms: Free text matched against searchable fields; empty means no filter
        sort: Name of the field to sort by
        direction: "asc" or "desc"
    """

    page: int = 0
    per_page: int = 10
    terms: str = ""
    sort: str = "name"
    direction: str = "asc"

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page must not be negative")
        if self.per_page < 1:
            raise ValueError("Page size must be at least 1")
        if self.per_page > MAX_PER_PAGE:
            raise ValueError(f"Page size cannot exceed {MAX_PER_PAGE}")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return self.page * self.per_page

    @property
    def is_descending(self) -> bool:
        return self.direction.strip().lower() == "desc"


@dataclass(frozen=True)
class Pagination(Generic[T]):
    """
    One page of results plus the metadata needed to navigate the rest.

    Attributes:
        current_page: Page number (0-indexed)
        per_page: Requested page size
        total: Total number of items across all pages
        items: Items of the current page, in the order the gateway returned them
    """

    current_page: int
    per_page: int
    total: int
    items: list[T] = field(default_factory=list)

    def map(self, fn: Callable[[T], U]) -> "Pagination[U]":
        """Transform every item, keeping the paging metadata."""
        return Pagination(
            current_page=self.current_page,
            per_page=self.per_page,
            total=self.total,
            items=[fn(item) for item in self.items],
        )
