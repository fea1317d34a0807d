"""Request validation: declarative schemas and the rule engine.

Usage:
    from crud_backbone.presentation.routers.api.validation import (
        FieldRule,
        ValidationSchema,
        validator,
    )
"""

from crud_backbone.presentation.routers.api.validation.context import RequestContext
from crud_backbone.presentation.routers.api.validation.engine import (
    FieldFailure,
    RequestValidationFailed,
    ValidationReport,
    validate_request,
    validated_data,
    validator,
)
from crud_backbone.presentation.routers.api.validation.pagination import (
    PAGINATION_SCHEMA,
    list_params,
    pagination_schema,
)
from crud_backbone.presentation.routers.api.validation.schema import (
    MAX_SQL_INTEGER,
    MISSING,
    Check,
    FailureKind,
    FieldRule,
    Location,
    ValidationSchema,
    exclude,
    extend,
    is_boolean,
    is_email,
    is_in,
    is_integer,
    is_phone,
    is_string,
    matches,
    max_length,
    min_length,
    pick,
    to_boolean,
    to_int,
    upper,
    with_identifier,
)

__all__ = [
    "MAX_SQL_INTEGER",
    "MISSING",
    "PAGINATION_SCHEMA",
    "Check",
    "FailureKind",
    "FieldFailure",
    "FieldRule",
    "Location",
    "RequestContext",
    "RequestValidationFailed",
    "ValidationReport",
    "ValidationSchema",
    "exclude",
    "extend",
    "is_boolean",
    "is_email",
    "is_in",
    "is_integer",
    "is_phone",
    "is_string",
    "list_params",
    "matches",
    "max_length",
    "min_length",
    "pagination_schema",
    "pick",
    "to_boolean",
    "to_int",
    "upper",
    "validate_request",
    "validated_data",
    "validator",
    "with_identifier",
]
