from .ids import CategoryId, GenreId

__all__ = ["CategoryId", "GenreId"]
