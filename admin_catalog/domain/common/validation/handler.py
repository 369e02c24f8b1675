"""
Validation handler and validator base classes.

A validator walks the rules of one aggregate and reports each violation to
a handler. The handler decides what a violation means: the Notification
collects every error, the ThrowsValidationHandler raises on the first one.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

from admin_catalog.domain.common.error import Error

T = TypeVar("T")


class ValidationHandler(ABC):
    """Receives rule violations reported by validators."""

    @abstractmethod
    def append(self, item: "Error | ValidationHandler") -> "ValidationHandler":
        """Record one error, or every error of another handler."""
        raise NotImplementedError

    @abstractmethod
    def validate(self, fn: Callable[[], T]) -> T | None:
        """Run fn, turning any failure it raises into recorded errors."""
        raise NotImplementedError

    @property
    @abstractmethod
    def errors(self) -> list[Error]:
        """Errors recorded so far, in insertion order."""
        raise NotImplementedError

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def first_error(self) -> Error | None:
        errors = self.errors
        return errors[0] if errors else None


class Validator(ABC):
    """
    Base class for aggregate validators.

    Subclasses implement validate() by checking each rule and calling
    self.handler.append() for every violation.
    """

    def __init__(self, handler: ValidationHandler) -> None:
        self._handler = handler

    @property
    def handler(self) -> ValidationHandler:
        return self._handler

    @abstractmethod
    def validate(self) -> None:
        raise NotImplementedError
