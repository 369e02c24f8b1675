from .category import Category

__all__ = ["Category"]
