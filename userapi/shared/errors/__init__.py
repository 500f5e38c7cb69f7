
from .base import (
    AppError,
    AuthenticationError,
    DomainError,
    InfrastructureError,
    StoreError,
    ValidationError,
)
from .http import handle_app_error, handle_http_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "DomainError",
    "InfrastructureError",
    "StoreError",
    "ValidationError",
    "handle_app_error",
    "handle_http_error",
    "register_error_handler",
]
