"""Create genre use case."""

import structlog

from admin_catalog.application.category.protocols.category_gateway import (
    CategoryGatewayProtocol,
)
from admin_catalog.application.genre.protocols.genre_gateway import GenreGatewayProtocol
from admin_catalog.application.genre.use_cases.category_references import (
    to_category_ids,
    validate_category_references,
)
from admin_catalog.application.genre.use_cases.dtos import CreateGenreCommand, CreateGenreOutput
from admin_catalog.domain.common.exceptions import NotificationError
from admin_catalog.domain.common.validation import Notification
from admin_catalog.domain.genre.entities.genre import Genre

logger = structlog.get_logger(__name__)


class CreateGenreUseCase:
    """Use case for creating genres."""

    def __init__(
        self,
        category_gateway: CategoryGatewayProtocol,
        genre_gateway: GenreGatewayProtocol,
    ) -> None:
        self.category_gateway = category_gateway
        self.genre_gateway = genre_gateway

    def execute(self, command: CreateGenreCommand) -> CreateGenreOutput:
        """
        Create a genre linked to existing categories.

        Args:
            command: Name, active flag and category ids of the new genre

        Returns:
            Output holding the id of the created genre

        Raises:
            NotificationError: With missing-category errors first, then name errors
        """
        category_ids = to_category_ids(command.categories)

        notification = Notification.create()
        notification.append(validate_category_references(self.category_gateway, category_ids))

        genre = notification.validate(lambda: Genre.new_genre(command.name, command.is_active))

        if notification.has_errors() or genre is None:
            raise NotificationError("Could not create Aggregate Genre", notification)

        genre.add_categories(category_ids)
        created = self.genre_gateway.create(genre)

        logger.info("genre_created", genre_id=created.id.value, categories=len(category_ids))
        return CreateGenreOutput.from_entity(created)
