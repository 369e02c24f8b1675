"""Create category use case."""

import structlog

from admin_catalog.application.category.protocols.category_gateway import (
    CategoryGatewayProtocol,
)
from admin_catalog.application.category.use_cases.dtos import (
    CreateCategoryCommand,
    CreateCategoryOutput,
)
from admin_catalog.domain.category.entities.category import Category
from admin_catalog.domain.common.exceptions import NotificationError
from admin_catalog.domain.common.validation import Notification

logger = structlog.get_logger(__name__)


class CreateCategoryUseCase:
    """Use case for creating categories."""

    def __init__(self, category_gateway: CategoryGatewayProtocol) -> None:
        self.category_gateway = category_gateway

    def execute(self, command: CreateCategoryCommand) -> CreateCategoryOutput:
        """
        Create a new category.

        Args:
            command: Name, description and active flag of the new category

        Returns:
            Output holding the id of the created category

        Raises:
            NotificationError: If the category breaks any validation rule
        """
        category = Category.new_category(command.name, command.description, command.is_active)

        notification = Notification.create()
        category.validate(notification)
        if notification.has_errors():
            raise NotificationError("Could not create Aggregate Category", notification)

        created = self.category_gateway.create(category)

        logger.info("category_created", category_id=created.id.value)
        return CreateCategoryOutput.from_entity(created)
