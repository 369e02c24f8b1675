from .handler import ValidationHandler, Validator
from .notification import Notification
from .throws_validation_handler import ThrowsValidationHandler

__all__ = [
    "Notification",
    "ThrowsValidationHandler",
    "ValidationHandler",
    "Validator",
]
