from admin_catalog.infrastructure.genre.schemas.genre_schemas import (
    CreateGenreRequest,
    GenreIdResponse,
    GenreListResponse,
    GenreResponse,
    UpdateGenreRequest,
)

__all__ = [
    "CreateGenreRequest",
    "GenreIdResponse",
    "GenreListResponse",
    "GenreResponse",
    "UpdateGenreRequest",
]
