"""Validation error record."""

from dataclasses import dataclass

from .value_object import ValueObject


@dataclass(frozen=True)
class Error(ValueObject):
    """A single rule violation, carried by notifications and domain errors."""

    message: str
