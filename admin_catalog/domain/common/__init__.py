"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- Error: A single validation rule violation
- DomainError: Exceptions carrying one or more Errors
"""

from .entity import Entity, EntityId
from .error import Error
from .exceptions import DomainError, NotFoundError, NotificationError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "Error",
    "NotFoundError",
    "NotificationError",
    "ValueObject",
]
