"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError instances (Result types) and the `code` member of every
field-level entry in an error envelope.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    FIELD_REQUIRED = "field_required"
    CUSTOM_CHECK_FAILED = "custom_check_failed"
    INVALID_PAGINATION = "invalid_pagination"

    # Resource errors
    RESOURCE_NOT_FOUND = "resource_not_found"
    CLIENT_NOT_FOUND = "client_not_found"

    # Conflict errors
    RESOURCE_CONFLICT = "resource_conflict"
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication errors
    AUTHENTICATION_FAILED = "authentication_failed"
    TOKEN_INVALID = "token_invalid"

    # Unexpected failures
    INTERNAL_ERROR = "internal_error"
