"""
Query base class.

Queries represent requests for information without side effects.
They are named descriptively: SearchQuery, GetCategory, etc.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """
    Base class for Queries.

    Queries are:
    - Immutable (frozen dataclass)
    - Carry filter/pagination parameters
    - Have no side effects (read-only)
    """
