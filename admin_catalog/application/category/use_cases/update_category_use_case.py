"""Update category use case."""

import structlog

from admin_catalog.application.category.protocols.category_gateway import (
    CategoryGatewayProtocol,
)
from admin_catalog.application.category.use_cases.dtos import (
    UpdateCategoryCommand,
    UpdateCategoryOutput,
)
from admin_catalog.application.common.result import Failure, Result, Success
from admin_catalog.domain.category.entities.category import Category
from admin_catalog.domain.common.exceptions import NotFoundError
from admin_catalog.domain.common.validation import Notification
from admin_catalog.domain.common.value_objects.ids import CategoryId

logger = structlog.get_logger(__name__)


class UpdateCategoryUseCase:
    """
    Use case for updating categories.

    Validation and storage failures are returned as Failure(notification)
    rather than raised. Only a missing category raises.
    """

    def __init__(self, category_gateway: CategoryGatewayProtocol) -> None:
        self.category_gateway = category_gateway

    def execute(
        self, command: UpdateCategoryCommand
    ) -> Result[UpdateCategoryOutput, Notification]:
        """
        Update name, description and active state of a category.

        Args:
            command: Id of the category and its new values

        Returns:
            Success with the category id, or Failure with every error found

        Raises:
            NotFoundError: If no category has the given id
        """
        category_id = CategoryId(command.id)

        category = self.category_gateway.find_by_id(category_id)
        if category is None:
            raise NotFoundError.with_(Category, category_id)

        notification = Notification.create()
        category.update(command.name, command.description, command.is_active).validate(
            notification
        )

        if notification.has_errors():
            return Failure(notification)
        return self._update(category)

    def _update(self, category: Category) -> Result[UpdateCategoryOutput, Notification]:
        try:
            updated = self.category_gateway.update(category)
        except Exception as e:  # noqa: BLE001
            logger.warning(
                "category_update_failed", category_id=category.id.value, error=str(e)
            )
            return Failure(Notification.create(e))

        logger.info("category_updated", category_id=updated.id.value)
        return Success(UpdateCategoryOutput.from_entity(updated))
