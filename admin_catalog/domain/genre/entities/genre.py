"""Genre aggregate."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Self

from admin_catalog.domain.common.clock import utc_now
from admin_catalog.domain.common.entity import Entity
from admin_catalog.domain.common.exceptions import NotificationError
from admin_catalog.domain.common.validation import Notification, ValidationHandler
from admin_catalog.domain.common.value_objects.ids import CategoryId, GenreId
from admin_catalog.domain.genre.genre_validator import GenreValidator


@dataclass(eq=False)
class Genre(Entity[GenreId]):
    """
    Genre grouping a list of categories.

    Business Rules:
    - Name must be present and 1 to 255 characters long once trimmed
    - Categories keep insertion order; repeated ids are not collapsed
    - deleted_at is set if and only if the genre is inactive

    A genre validates itself whenever it is built or updated and raises
    NotificationError with every violated rule, so an invalid instance is
    never handed back to the caller.
    """

    # Identity
    id: GenreId

    # Content
    name: str | None
    active: bool
    categories: list[CategoryId] = field(default_factory=list)

    # Timestamps
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._self_validate()

    def _self_validate(self) -> None:
        notification = Notification.create()
        self.validate(notification)
        if notification.has_errors():
            raise NotificationError("Failed to validate an Aggregate Genre", notification)

    def validate(self, handler: ValidationHandler) -> None:
        GenreValidator(self, handler).validate()

    # Lifecycle
    def activate(self) -> Self:
        """Mark the genre active and clear its deletion timestamp."""
        self.deleted_at = None
        self.active = True
        self.updated_at = utc_now()
        return self

    def deactivate(self) -> Self:
        """Mark the genre inactive. An existing deleted_at is kept."""
        now = utc_now()
        if self.deleted_at is None:
            self.deleted_at = now
        self.active = False
        self.updated_at = now
        return self

    def update(
        self, name: str | None, is_active: bool, categories: list[CategoryId] | None
    ) -> Self:
        """
        Replace name, state and the whole category list.

        Raises:
            NotificationError: If the new name breaks any rule
        """
        if is_active:
            self.activate()
        else:
            self.deactivate()
        self.name = name
        self.categories = list(categories or [])
        self.updated_at = utc_now()
        self._self_validate()
        return self

    # Category association
    def add_category(self, category_id: CategoryId | None) -> Self:
        if category_id is None:
            return self
        self.categories.append(category_id)
        self.updated_at = utc_now()
        return self

    def add_categories(self, category_ids: list[CategoryId] | None) -> Self:
        added = [cid for cid in category_ids or [] if cid is not None]
        if not added:
            return self
        self.categories.extend(added)
        self.updated_at = utc_now()
        return self

    def remove_category(self, category_id: CategoryId | None) -> Self:
        if category_id is None or category_id not in self.categories:
            return self
        self.categories.remove(category_id)
        self.updated_at = utc_now()
        return self

    def clone(self) -> "Genre":
        """Return an independent copy with the same identity."""
        return Genre.with_(
            id=self.id,
            name=self.name,
            active=self.active,
            categories=list(self.categories),
            created_at=self.created_at,
            updated_at=self.updated_at,
            deleted_at=self.deleted_at,
        )

    # Factory methods
    @classmethod
    def new_genre(cls, name: str | None, is_active: bool) -> "Genre":
        """
        Factory for creating a new genre with no categories.

        Raises:
            NotificationError: If the name breaks any rule
        """
        now = utc_now()
        return cls(
            id=GenreId.generate(),
            name=name,
            active=is_active,
            categories=[],
            created_at=now,
            updated_at=now,
            deleted_at=None if is_active else now,
        )

    @classmethod
    def with_(
        cls,
        id: GenreId,
        name: str | None,
        active: bool,
        categories: list[CategoryId],
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None,
    ) -> "Genre":
        """Factory for reconstituting a genre from persistence."""
        return cls(
            id=id,
            name=name,
            active=active,
            categories=list(categories),
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )
