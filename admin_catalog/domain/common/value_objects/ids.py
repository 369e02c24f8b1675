from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Strongly-typed category identifier."""

    value: str


@dataclass(frozen=True)
class GenreId(EntityId):
    """Strongly-typed genre identifier."""

    value: str
