"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass(eq=False)
    class Category(Entity[CategoryId]):
        id: CategoryId
        name: str

        def rename(self, name: str) -> None:
            self.name = name
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Catalog identifiers are opaque strings. New aggregates get a random
    32-char hex UUID; anything read back from storage or received from a
    client is wrapped as-is.

    Example:
        @dataclass(frozen=True)
        class CategoryId(EntityId):
            pass

        category_id = CategoryId("123")
        genre_id = GenreId("123")
        # These are different types, preventing accidental mixing
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Create a new unique identifier."""
        return cls(uuid4().hex)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType. Dataclass
    subclasses must pass eq=False so identity equality is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
