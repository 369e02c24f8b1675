from .category_dtos import (
    CategoryListOutput,
    CategoryOutput,
    CreateCategoryCommand,
    CreateCategoryOutput,
    UpdateCategoryCommand,
    UpdateCategoryOutput,
)

__all__ = [
    "CategoryListOutput",
    "CategoryOutput",
    "CreateCategoryCommand",
    "CreateCategoryOutput",
    "UpdateCategoryCommand",
    "UpdateCategoryOutput",
]
