from .create_category_use_case import CreateCategoryUseCase
from .delete_category_use_case import DeleteCategoryUseCase
from .get_category_by_id_use_case import GetCategoryByIdUseCase
from .list_categories_use_case import ListCategoriesUseCase
from .update_category_use_case import UpdateCategoryUseCase

__all__ = [
    "CreateCategoryUseCase",
    "DeleteCategoryUseCase",
    "GetCategoryByIdUseCase",
    "ListCategoriesUseCase",
    "UpdateCategoryUseCase",
]
