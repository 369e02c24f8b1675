"""Protocol for the Category gateway."""

from typing import Protocol

from admin_catalog.application.common.pagination import Pagination, SearchQuery
from admin_catalog.domain.category.entities.category import Category
from admin_catalog.domain.common.value_objects.ids import CategoryId


class CategoryGatewayProtocol(Protocol):
    """Protocol for Category persistence operations."""

    def create(self, category: Category) -> Category:
        """
        Persist a new category.

        Args:
            category: The category entity to store

        Returns:
            The stored category entity
        """
        ...

    def update(self, category: Category) -> Category:
        """
        Persist changes to an existing category.

        Args:
            category: The category entity to store

        Returns:
            The stored category entity
        """
        ...

    def delete_by_id(self, category_id: CategoryId) -> None:
        """
        Delete a category. Deleting an unknown id is not an error.

        Args:
            category_id: The category ID
        """
        ...

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        """
        Find a category by ID.

        Args:
            category_id: The category ID

        Returns:
            Category entity if found, None otherwise
        """
        ...

    def find_all(self, query: SearchQuery) -> Pagination[Category]:
        """
        Search categories by name or description.

        Args:
            query: Search terms, sort and paging parameters

        Returns:
            One page of category entities
        """
        ...

    def exists_by_ids(self, category_ids: list[CategoryId]) -> list[CategoryId]:
        """
        Check which of the given ids belong to stored categories.

        Args:
            category_ids: Category IDs to look up

        Returns:
            The subset of ids that exist
        """
        ...
