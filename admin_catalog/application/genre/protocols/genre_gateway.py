"""Protocol for the Genre gateway."""

from typing import Protocol

from admin_catalog.application.common.pagination import Pagination, SearchQuery
from admin_catalog.domain.common.value_objects.ids import GenreId
from admin_catalog.domain.genre.entities.genre import Genre


class GenreGatewayProtocol(Protocol):
    """Protocol for Genre persistence operations."""

    def create(self, genre: Genre) -> Genre:
        """Persist a new genre together with its category links."""
        ...

    def update(self, genre: Genre) -> Genre:
        """Persist changes to a genre, replacing its category links."""
        ...

    def delete_by_id(self, genre_id: GenreId) -> None:
        """Delete a genre. Deleting an unknown id is not an error."""
        ...

    def find_by_id(self, genre_id: GenreId) -> Genre | None:
        """Find a genre by ID, or None."""
        ...

    def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        """Search genres by name."""
        ...
