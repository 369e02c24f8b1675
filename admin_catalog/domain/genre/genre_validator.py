"""Validation rules for the Genre aggregate."""

from typing import TYPE_CHECKING

from admin_catalog.domain.common.error import Error
from admin_catalog.domain.common.validation import ValidationHandler, Validator

if TYPE_CHECKING:
    from admin_catalog.domain.genre.entities.genre import Genre

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 255


class GenreValidator(Validator):
    """Checks the name rules of a genre."""

    def __init__(self, genre: "Genre", handler: ValidationHandler) -> None:
        super().__init__(handler)
        self.genre = genre

    def validate(self) -> None:
        self._check_name_constraints()

    def _check_name_constraints(self) -> None:
        name = self.genre.name
        if name is None:
            self.handler.append(Error("'name' should not be null"))
            return

        stripped = name.strip()
        if not stripped:
            self.handler.append(Error("'name' should not be empty"))
            return

        if not NAME_MIN_LENGTH <= len(stripped) <= NAME_MAX_LENGTH:
            self.handler.append(
                Error(
                    f"'name' must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
                )
            )
