from .create_genre_use_case import CreateGenreUseCase
from .delete_genre_use_case import DeleteGenreUseCase
from .get_genre_by_id_use_case import GetGenreByIdUseCase
from .list_genres_use_case import ListGenresUseCase
from .update_genre_use_case import UpdateGenreUseCase

__all__ = [
    "CreateGenreUseCase",
    "DeleteGenreUseCase",
    "GetGenreByIdUseCase",
    "ListGenresUseCase",
    "UpdateGenreUseCase",
]
