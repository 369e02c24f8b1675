"""List genres use case."""

from admin_catalog.application.common.pagination import Pagination, SearchQuery
from admin_catalog.application.genre.protocols.genre_gateway import GenreGatewayProtocol
from admin_catalog.application.genre.use_cases.dtos import GenreListOutput


class ListGenresUseCase:
    """Use case for searching and paging through genres."""

    def __init__(self, genre_gateway: GenreGatewayProtocol) -> None:
        self.genre_gateway = genre_gateway

    def execute(self, query: SearchQuery) -> Pagination[GenreListOutput]:
        return self.genre_gateway.find_all(query).map(GenreListOutput.from_entity)
