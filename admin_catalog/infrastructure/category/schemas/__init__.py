from admin_catalog.infrastructure.category.schemas.category_schemas import (
    CategoryIdResponse,
    CategoryListResponse,
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)

__all__ = [
    "CategoryIdResponse",
    "CategoryListResponse",
    "CategoryResponse",
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
]
