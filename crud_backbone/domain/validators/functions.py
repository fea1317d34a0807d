"""Centralized validation and sanitizing functions.

Pure functions reused by the request rule engine and by tests. Predicates
return ``bool``; sanitizers return the transformed value.
"""

import re
from typing import Any

from email_validator import EmailNotValidError, validate_email

# Brazilian landline/mobile number: "(34) 99999-9999" or "(34) 3333-3333"
PHONE_PATTERN = re.compile(r"^\([1-9]{2}\) (?:[2-8]|9[1-9])[0-9]{3}-[0-9]{4}$")


def is_valid_email(value: Any) -> bool:
    """Check e-mail syntax with email-validator (no deliverability lookup).

    Example:
        >>> is_valid_email("a@x.com")
        True
        >>> is_valid_email("invalid")
        False
    """
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone(value: Any) -> bool:
    """Check a phone number against PHONE_PATTERN.

    Example:
        >>> is_valid_phone("(34) 99999-9999")
        True
        >>> is_valid_phone("34 99999-9999")
        False
    """
    return isinstance(value, str) and PHONE_PATTERN.match(value) is not None


def first_upper_case(value: Any) -> str | None:
    """Capitalise the first character of a string, leaving the rest untouched.

    Non-string input yields ``None`` so that a following string check fails.

    Example:
        >>> first_upper_case("ana maria")
        'Ana maria'
    """
    if not isinstance(value, str):
        return None
    return value[:1].upper() + value[1:]
