from .base import AppError, DomainError, InfrastructureError, StorageFailureError, ValidationError
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "StorageFailureError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
