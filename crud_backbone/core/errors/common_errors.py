"""Common error classes used across all resources and layers.

Error Types:
- ValidationError: A field failed a check, sanitizer or custom validator
- NotFoundError: An identifier does not resolve to a stored row
- ConflictError: A storage-level uniqueness violation
- AuthenticationError: The caller could not be authenticated

Usage:
    from crud_backbone.core.errors import ValidationError
    from crud_backbone.core.enums import ErrorCode
    from crud_backbone.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.VALIDATION_FAILED,
        message="Invalid name",
        field="name",
    ))
"""

from dataclasses import dataclass

from crud_backbone.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Client, Application, ...).
        resource_id: ID of the resource that was not found.
        field: Request field that carried the identifier.
    """

    resource_type: str
    resource_id: str
    field: str | None = "id"


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate unique value).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, key, ...).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (missing or unknown access key)."""

    pass
