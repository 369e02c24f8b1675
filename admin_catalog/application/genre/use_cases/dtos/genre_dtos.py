"""Commands and outputs for genre use cases."""

from dataclasses import dataclass, field
from datetime import datetime

from admin_catalog.application.common.command import Command
from admin_catalog.domain.genre.entities.genre import Genre


@dataclass(frozen=True)
class CreateGenreCommand(Command):
    name: str | None
    is_active: bool
    categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateGenreCommand(Command):
    id: str
    name: str | None
    is_active: bool
    categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CreateGenreOutput:
    id: str

    @classmethod
    def from_entity(cls, genre: Genre) -> "CreateGenreOutput":
        return cls(id=genre.id.value)


@dataclass(frozen=True)
class UpdateGenreOutput:
    id: str

    @classmethod
    def from_entity(cls, genre: Genre) -> "UpdateGenreOutput":
        return cls(id=genre.id.value)


@dataclass(frozen=True)
class GenreOutput:
    """Full view of one genre."""

    id: str
    name: str | None
    is_active: bool
    categories: list[str]
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_entity(cls, genre: Genre) -> "GenreOutput":
        return cls(
            id=genre.id.value,
            name=genre.name,
            is_active=genre.active,
            categories=[category_id.value for category_id in genre.categories],
            created_at=genre.created_at,
            updated_at=genre.updated_at,
            deleted_at=genre.deleted_at,
        )


@dataclass(frozen=True)
class GenreListOutput:
    """Projection of a genre used in list pages."""

    id: str
    name: str | None
    is_active: bool
    categories: list[str]
    created_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_entity(cls, genre: Genre) -> "GenreListOutput":
        return cls(
            id=genre.id.value,
            name=genre.name,
            is_active=genre.active,
            categories=[category_id.value for category_id in genre.categories],
            created_at=genre.created_at,
            deleted_at=genre.deleted_at,
        )
