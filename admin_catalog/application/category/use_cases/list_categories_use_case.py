"""List categories use case."""

from admin_catalog.application.category.protocols.category_gateway import (
    CategoryGatewayProtocol,
)
from admin_catalog.application.category.use_cases.dtos import CategoryListOutput
from admin_catalog.application.common.pagination import Pagination, SearchQuery


class ListCategoriesUseCase:
    """Use case for searching and paging through categories."""

    def __init__(self, category_gateway: CategoryGatewayProtocol) -> None:
        self.category_gateway = category_gateway

    def execute(self, query: SearchQuery) -> Pagination[CategoryListOutput]:
        return self.category_gateway.find_all(query).map(CategoryListOutput.from_entity)
