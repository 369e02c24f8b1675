"""Get category by id use case."""

from admin_catalog.application.category.protocols.category_gateway import (
    CategoryGatewayProtocol,
)
from admin_catalog.application.category.use_cases.dtos import CategoryOutput
from admin_catalog.domain.category.entities.category import Category
from admin_catalog.domain.common.exceptions import NotFoundError
from admin_catalog.domain.common.value_objects.ids import CategoryId


class GetCategoryByIdUseCase:
    """Use case for retrieving a single category."""

    def __init__(self, category_gateway: CategoryGatewayProtocol) -> None:
        self.category_gateway = category_gateway

    def execute(self, category_id: str) -> CategoryOutput:
        """
        Raises:
            NotFoundError: If no category has the given id
        """
        category_id_vo = CategoryId(category_id)

        category = self.category_gateway.find_by_id(category_id_vo)
        if category is None:
            raise NotFoundError.with_(Category, category_id_vo)

        return CategoryOutput.from_entity(category)
