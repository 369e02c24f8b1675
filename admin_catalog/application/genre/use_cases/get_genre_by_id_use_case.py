"""Get genre by id use case."""

from admin_catalog.application.genre.protocols.genre_gateway import GenreGatewayProtocol
from admin_catalog.application.genre.use_cases.dtos import GenreOutput
from admin_catalog.domain.common.exceptions import NotFoundError
from admin_catalog.domain.common.value_objects.ids import GenreId
from admin_catalog.domain.genre.entities.genre import Genre


class GetGenreByIdUseCase:
    """Use case for retrieving a single genre."""

    def __init__(self, genre_gateway: GenreGatewayProtocol) -> None:
        self.genre_gateway = genre_gateway

    def execute(self, genre_id: str) -> GenreOutput:
        genre_id_vo = GenreId(genre_id)

        genre = self.genre_gateway.find_by_id(genre_id_vo)
        if genre is None:
            raise NotFoundError.with_(Genre, genre_id_vo)

        return GenreOutput.from_entity(genre)
