"""Validation rules for the Category aggregate."""

from typing import TYPE_CHECKING

from admin_catalog.domain.common.error import Error
from admin_catalog.domain.common.validation import ValidationHandler, Validator

if TYPE_CHECKING:
    from admin_catalog.domain.category.entities.category import Category

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255


class CategoryValidator(Validator):
    """Checks the name rules of a category."""

    def __init__(self, category: "Category", handler: ValidationHandler) -> None:
        super().__init__(handler)
        self.category = category

    def validate(self) -> None:
        self._check_name_constraints()

    def _check_name_constraints(self) -> None:
        name = self.category.name
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
