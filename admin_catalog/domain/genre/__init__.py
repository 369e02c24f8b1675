"""Genre aggregate and its validation rules."""

from .entities.genre import Genre
from .genre_validator import GenreValidator

__all__ = ["Genre", "GenreValidator"]
