"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They should be caught and translated to appropriate responses
by the infrastructure layer.
"""

from typing import TYPE_CHECKING

from .entity import Entity, EntityId
from .error import Error

if TYPE_CHECKING:
    from .validation.handler import ValidationHandler


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Carries the list of rule violations that caused it, so callers can
    report every failed rule instead of only the first one.
    """

    def __init__(self, message: str, errors: list[Error] | None = None) -> None:
        self.message = message
        self.errors = list(errors or [])
        super().__init__(message)

    @classmethod
    def with_error(cls, error: Error) -> "DomainError":
        """Build a domain error from a single rule violation."""
        return cls(error.message, [error])

    @classmethod
    def with_errors(cls, errors: list[Error]) -> "DomainError":
        """Build a domain error from several rule violations."""
        message = errors[0].message if errors else ""
        return cls(message, errors)

    def __str__(self) -> str:
        if self.message:
            return self.message
        return "; ".join(error.message for error in self.errors)


class NotificationError(DomainError):
    """
    Raised when an aggregate is constructed or updated through the throwing path.

    Example: Genre.new_genre("  ", True) fails with every violated name rule.
    """

    def __init__(self, message: str, handler: "ValidationHandler") -> None:
        super().__init__(message, handler.errors)


class NotFoundError(DomainError):
    """
    Raised when an aggregate cannot be found by its identifier.

    Example: Looking up a category by an ID that doesn't exist.
    Carries no rule violations, only the message.
    """

    def __init__(self, message: str, entity_type: str, entity_id: str) -> None:
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id

    @classmethod
    def with_(cls, aggregate: type[Entity], entity_id: EntityId) -> "NotFoundError":
        """Build the not-found error for an aggregate class and id."""
        entity_type = aggregate.__name__
        message = f"{entity_type} with ID {entity_id.value} was not found"
        return cls(message, entity_type, entity_id.value)
