from .genre_dtos import (
    CreateGenreCommand,
    CreateGenreOutput,
    GenreListOutput,
    GenreOutput,
    UpdateGenreCommand,
    UpdateGenreOutput,
)

__all__ = [
    "CreateGenreCommand",
    "CreateGenreOutput",
    "GenreListOutput",
    "GenreOutput",
    "UpdateGenreCommand",
    "UpdateGenreOutput",
]
