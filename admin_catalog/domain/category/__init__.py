"""Category aggregate and its validation rules."""

from .category_validator import CategoryValidator
from .entities.category import Category

__all__ = ["Category", "CategoryValidator"]
