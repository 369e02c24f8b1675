"""Fail-fast validation handler."""

from collections.abc import Callable
from typing import TypeVar

from admin_catalog.domain.common.error import Error
from admin_catalog.domain.common.exceptions import DomainError

from .handler import ValidationHandler

T = TypeVar("T")


class ThrowsValidationHandler(ValidationHandler):
    """Raises DomainError on the first reported violation."""

    def append(self, item: "Error | ValidationHandler") -> "ThrowsValidationHandler":
        if isinstance(item, ValidationHandler):
            raise DomainError.with_errors(item.errors)
        raise DomainError.with_error(item)

    def validate(self, fn: Callable[[], T]) -> T | None:
        try:
            return fn()
        except DomainError:
            raise
        except Exception as e:
            raise DomainError.with_error(Error(str(e))) from e

    @property
    def errors(self) -> list[Error]:
        return []
