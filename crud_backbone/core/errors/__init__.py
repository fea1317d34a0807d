"""Core errors package.

Usage:
    from crud_backbone.core.errors import DomainError, ValidationError, NotFoundError
"""

from crud_backbone.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from crud_backbone.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
]
