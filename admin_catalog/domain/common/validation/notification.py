"""
Notification validation handler.

Collects every rule violation instead of stopping at the first one, so a
caller can report all problems of a request at once.

Example:
    notification = Notification.create()
    category.validate(notification)
    if notification.has_errors():
        return Failure(notification)
"""

from collections.abc import Callable
from typing import TypeVar

from admin_catalog.domain.common.error import Error
from admin_catalog.domain.common.exceptions import DomainError

from .handler import ValidationHandler

T = TypeVar("T")


class Notification(ValidationHandler):
    """Mutable collector of validation errors. Never raises."""

    def __init__(self, errors: list[Error] | None = None) -> None:
        self._errors: list[Error] = list(errors or [])

    @classmethod
    def create(cls, error: Error | BaseException | None = None) -> "Notification":
        """
        Create a notification.

        Args:
            error: Optional first error. An exception is recorded as one
                error holding its message.

        Returns:
            New notification instance
        """
        if error is None:
            return cls()
        if isinstance(error, BaseException):
            return cls([Error(str(error))])
        return cls([error])

    def append(self, item: "Error | ValidationHandler") -> "Notification":
        if isinstance(item, ValidationHandler):
            self._errors.extend(item.errors)
        else:
            self._errors.append(item)
        return self

    def validate(self, fn: Callable[[], T]) -> T | None:
        """
        Run fn and record whatever it raises.

        A DomainError contributes all of its errors; any other exception is
        recorded as a single error with its message.
        """
        try:
            return fn()
        except DomainError as e:
            self._errors.extend(e.errors)
        except Exception as e:  # noqa: BLE001
            self._errors.append(Error(str(e)))
        return None

    @property
    def errors(self) -> list[Error]:
        return list(self._errors)

    def __repr__(self) -> str:
        return f"Notification(errors={self._errors!r})"
