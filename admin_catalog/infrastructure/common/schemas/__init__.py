"""Common infrastructure schemas."""

from admin_catalog.infrastructure.common.schemas.response_wrappers import (
    ERROR_RESPONSES,
    ErrorItem,
    ErrorResponse,
    HealthResponse,
    PaginatedResponse,
)

__all__ = [
    "ERROR_RESPONSES",
    "ErrorItem",
    "ErrorResponse",
    "HealthResponse",
    "PaginatedResponse",
]
