"""Update genre use case."""

import structlog

from admin_catalog.application.category.protocols.category_gateway import (
    CategoryGatewayProtocol,
)
from admin_catalog.application.genre.protocols.genre_gateway import GenreGatewayProtocol
from admin_catalog.application.genre.use_cases.category_references import (
    to_category_ids,
    validate_category_references,
)
from admin_catalog.application.genre.use_cases.dtos import UpdateGenreCommand, UpdateGenreOutput
from admin_catalog.domain.common.exceptions import NotFoundError, NotificationError
from admin_catalog.domain.common.validation import Notification
from admin_catalog.domain.common.value_objects.ids import GenreId
from admin_catalog.domain.genre.entities.genre import Genre

logger = structlog.get_logger(__name__)


class UpdateGenreUseCase:
    """
    Use case for updating genres.

    Unlike category updates, every failure here is raised: missing
    categories and name errors are gathered first and then raised together
    as one NotificationError.
    """

    def __init__(
        self,
        category_gateway: CategoryGatewayProtocol,
        genre_gateway: GenreGatewayProtocol,
    ) -> None:
        self.category_gateway = category_gateway
        self.genre_gateway = genre_gateway

    def execute(self, command: UpdateGenreCommand) -> UpdateGenreOutput:
        """
        Replace name, active state and categories of a genre.

        Args:
            command: Id of the genre and its new values

        Returns:
            Output holding the id of the updated genre

        Raises:
            NotFoundError: If no genre has the given id
            NotificationError: With missing-category errors first, then name errors
        """
        genre_id = GenreId(command.id)
        category_ids = to_category_ids(command.categories)

        genre = self.genre_gateway.find_by_id(genre_id)
        if genre is None:
            raise NotFoundError.with_(Genre, genre_id)

        notification = Notification.create()
        notification.append(validate_category_references(self.category_gateway, category_ids))
        notification.validate(lambda: genre.update(command.name, command.is_active, category_ids))

        if notification.has_errors():
            raise NotificationError(
                f"Could not update Aggregate Genre {command.id}", notification
            )

        updated = self.genre_gateway.update(genre)

        logger.info("genre_updated", genre_id=updated.id.value, categories=len(category_ids))
        return UpdateGenreOutput.from_entity(updated)
