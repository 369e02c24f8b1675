"""Category aggregate."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Self

from admin_catalog.domain.category.category_validator import CategoryValidator
from admin_catalog.domain.common.clock import utc_now
from admin_catalog.domain.common.entity import Entity
from admin_catalog.domain.common.validation import ValidationHandler
from admin_catalog.domain.common.value_objects.ids import CategoryId


@dataclass(eq=False)
class Category(Entity[CategoryId]):
    """
    Category of catalog content.

    Business Rules:
    - Name must be present and 3 to 255 characters long once trimmed
    - Description is free text and may be blank
    - deleted_at is set if and only if the category is inactive

    Construction does not validate. Callers run validate() with the handler
    that fits them: a Notification to collect errors, or a
    ThrowsValidationHandler to fail on the first one.
    """

    # Identity
    id: CategoryId

    # Content
    name: str | None
    description: str | None
    active: bool

    # Timestamps
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    def validate(self, handler: ValidationHandler) -> None:
        CategoryValidator(self, handler).validate()

    # Lifecycle
    def activate(self) -> Self:
        """Mark the category active and clear its deletion timestamp."""
        self.deleted_at = None
        self.active = True
        self.updated_at = utc_now()
        return self

    def deactivate(self) -> Self:
        """Mark the category inactive. An existing deleted_at is kept."""
        now = utc_now()
        if self.deleted_at is None:
            self.deleted_at = now
        self.active = False
        self.updated_at = now
        return self

    def update(self, name: str | None, description: str | None, is_active: bool) -> Self:
        """
        Replace the editable fields.

        Never raises: an invalid name is assigned anyway and only shows up
        on the next validate() call.
        """
        if is_active:
            self.activate()
        else:
            self.deactivate()
        self.name = name
        self.description = description
        self.updated_at = utc_now()
        return self

    def clone(self) -> "Category":
        """Return an independent copy with the same identity."""
        return replace(self)

    # Factory methods
    @classmethod
    def new_category(cls, name: str | None, description: str | None, is_active: bool) -> "Category":
        """Factory for creating a new category with a generated id."""
        now = utc_now()
        return cls(
            id=CategoryId.generate(),
            name=name,
            description=description,
            active=is_active,
            created_at=now,
            updated_at=now,
            deleted_at=None if is_active else now,
        )

    @classmethod
    def with_(
        cls,
        id: CategoryId,
        name: str | None,
        description: str | None,
        active: bool,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None,
    ) -> "Category":
        """Factory for reconstituting a category from persistence."""
        return cls(
            id=id,
            name=name,
            description=description,
            active=active,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )
