"""Delete genre use case."""

import structlog

from admin_catalog.application.genre.protocols.genre_gateway import GenreGatewayProtocol
from admin_catalog.domain.common.value_objects.ids import GenreId

logger = structlog.get_logger(__name__)


class DeleteGenreUseCase:
    """Use case for deleting genres."""

    def __init__(self, genre_gateway: GenreGatewayProtocol) -> None:
        self.genre_gateway = genre_gateway

    def execute(self, genre_id: str) -> None:
        """Delete a genre and its category links. Unknown ids are ignored."""
        self.genre_gateway.delete_by_id(GenreId(genre_id))

        logger.info("genre_deleted", genre_id=genre_id)
