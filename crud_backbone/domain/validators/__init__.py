"""Validators package exports."""

from crud_backbone.domain.validators.functions import (
    PHONE_PATTERN,
    first_upper_case,
    is_valid_email,
    is_valid_phone,
)

__all__ = [
    "PHONE_PATTERN",
    "first_upper_case",
    "is_valid_email",
    "is_valid_phone",
]
