"""Delete category use case."""

import structlog

from admin_catalog.application.category.protocols.category_gateway import (
    CategoryGatewayProtocol,
)
from admin_catalog.domain.common.value_objects.ids import CategoryId

logger = structlog.get_logger(__name__)


class DeleteCategoryUseCase:
    """Use case for deleting categories."""

    def __init__(self, category_gateway: CategoryGatewayProtocol) -> None:
        self.category_gateway = category_gateway

    def execute(self, category_id: str) -> None:
        """
        Delete a category (hard delete).

        Deleting an id that does not exist succeeds silently.

        Args:
            category_id: ID of the category to delete
        """
        self.category_gateway.delete_by_id(CategoryId(category_id))

        logger.info("category_deleted", category_id=category_id)
