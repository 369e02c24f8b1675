"""Common response wrapper schemas for API responses."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from admin_catalog.domain.common.exceptions import DomainError

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic pagination wrapper. Pages are 0-indexed."""

    current_page: int
    per_page: int
    total: int
    items: list[T]


class ErrorItem(BaseModel):
    """One violated rule."""

    message: str


class ErrorResponse(BaseModel):
    """Body returned for domain failures."""

    message: str
    errors: list[ErrorItem] = Field(default_factory=list)

    @classmethod
    def from_error(cls, error: DomainError) -> "ErrorResponse":
        return cls(
            message=error.message,
            errors=[ErrorItem(message=e.message) for e in error.errors],
        )


class HealthResponse(BaseModel):
    status: str


# OpenAPI documentation for routes that can fail with a domain error
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}
