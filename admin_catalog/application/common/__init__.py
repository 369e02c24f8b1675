"""
Application common module.

Contains base classes for application layer:
- Command: Base class for write operations
- Query: Base class for read operations
- SearchQuery / Pagination: Paged list parameters and results
- Result: Result type for use case outcomes
"""

from .command import Command
from .pagination import MAX_PER_PAGE, Pagination, SearchQuery
from .query import Query
from .result import Failure, Result, Success

__all__ = [
    "MAX_PER_PAGE",
    "Command",
    "Failure",
    "Pagination",
    "Query",
    "Result",
    "SearchQuery",
    "Success",
]
