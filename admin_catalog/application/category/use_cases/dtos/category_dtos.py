"""Commands and outputs for category use cases."""

from dataclasses import dataclass
from datetime import datetime

from admin_catalog.application.common.command import Command
from admin_catalog.domain.category.entities.category import Category


@dataclass(frozen=True)
class CreateCategoryCommand(Command):
    name: str | None
    description: str | None
    is_active: bool


@dataclass(frozen=True)
class UpdateCategoryCommand(Command):
    id: str
    name: str | None
    description: str | None
    is_active: bool


@dataclass(frozen=True)
class CreateCategoryOutput:
    id: str

    @classmethod
    def from_entity(cls, category: Category) -> "CreateCategoryOutput":
        return cls(id=category.id.value)


@dataclass(frozen=True)
class UpdateCategoryOutput:
    id: str

    @classmethod
    def from_entity(cls, category: Category) -> "UpdateCategoryOutput":
        return cls(id=category.id.value)


@dataclass(frozen=True)
class CategoryOutput:
    """Full view of one category."""

    id: str
    name: str | None
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryOutput":
        return cls(
            id=category.id.value,
            name=category.name,
            description=category.description,
            is_active=category.active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )


@dataclass(frozen=True)
class CategoryListOutput:
    """Projection of a category used in list pages."""

    id: str
    name: str | None
    description: str | None
    is_active: bool
    created_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryListOutput":
        return cls(
            id=category.id.value,
            name=category.name,
            description=category.description,
            is_active=category.active,
            created_at=category.created_at,
            deleted_at=category.deleted_at,
        )
