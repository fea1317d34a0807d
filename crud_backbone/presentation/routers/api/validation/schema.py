"""Declarative validation schemas.

A schema is an immutable, ordered mapping of field name -> FieldRule. Request
validators are compiled from schemas (see engine.validator), and variants are
derived with pure functions instead of copying and mutating dicts:

    CLIENT_SCHEMA = ValidationSchema([ID_RULE, NAME_RULE, EMAIL_RULE])
    CREATE = exclude(CLIENT_SCHEMA, "id")
    UPDATE = with_identifier(CLIENT_SCHEMA, ID_RULE)
    ID_ONLY = pick(CLIENT_SCHEMA, "id")

Exports:
    Location, FailureKind, MISSING
    Check, MAX_SQL_INTEGER and the built-in check factories
    Sanitizers (to_int, to_boolean, upper)
    FieldRule, ValidationSchema
    exclude, with_identifier, pick, extend
"""

import re
from collections.abc import Awaitable, Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from crud_backbone.core.enums import ErrorCode
from crud_backbone.core.result import Result
from crud_backbone.domain.validators import is_valid_email, is_valid_phone

if TYPE_CHECKING:
    from crud_backbone.presentation.routers.api.validation.context import (
        RequestContext,
    )


class Location(str, Enum):
    """Request part a rule reads its value from."""

    BODY = "body"
    QUERY = "query"
    PATH = "path"


class FailureKind(str, Enum):
    """How a rule failure is reported.

    Attributes:
        VALIDATION: Reported as 422 Unprocessable Entity.
        NOT_FOUND: Reported as 404 (identifier rules).
    """

    VALIDATION = "validation"
    NOT_FOUND = "not_found"


class _Missing:
    """Sentinel for "no default"; distinct from an explicit None default."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

CustomValidator = Callable[
    [Any, "RequestContext"],
    Result[Any, str] | Awaitable[Result[Any, str]],
]
Sanitizer = Callable[[Any], Any]


# =============================================================================
# Checks
# =============================================================================


# Largest value a 64-bit signed SQL INTEGER/BIGINT column or OFFSET accepts
MAX_SQL_INTEGER = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Check:
    """Named predicate over a single value.

    Attributes:
        name: Short identifier used in logs ("is_string", "min_length(3)").
        predicate: Returns True when the value passes.
    """

    name: str
    predicate: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return bool(self.predicate(value))


def is_string() -> Check:
    """Value is a ``str``."""
    return Check("is_string", lambda value: isinstance(value, str))


def is_boolean() -> Check:
    """Value is a real ``bool`` (no "true"/1 coercion; sanitize first)."""
    return Check("is_boolean", lambda value: isinstance(value, bool))


def is_integer(min_value: int | None = None, max_value: int | None = None) -> Check:
    """Integer check with optional inclusive bounds (``bool`` is rejected).

    Args:
        min_value: Smallest accepted value, or None for no lower bound.
        max_value: Largest accepted value, or None for no upper bound.

    Returns:
        Check named ``is_integer(min, max)``.

    Example:
        >>> is_integer(min_value=1)(0)
        False
    """

    def predicate(value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if min_value is not None and value < min_value:
            return False
        if max_value is not None and value > max_value:
            return False
        return True

    return Check(f"is_integer({min_value}, {max_value})", predicate)


def is_email() -> Check:
    """E-mail syntax via email-validator (no deliverability lookup)."""
    return Check("is_email", is_valid_email)


def is_phone() -> Check:
    """Phone number in the ``(34) 99999-9999`` format."""
    return Check("is_phone", is_valid_phone)


def min_length(length: int) -> Check:
    """String with at least ``length`` characters."""
    return Check(
        f"min_length({length})",
        lambda value: isinstance(value, str) and len(value) >= length,
    )


def max_length(length: int) -> Check:
    """String with at most ``length`` characters (column width guard).

    Example:
        >>> max_length(3)("abcd")
        False
    """
    return Check(
        f"max_length({length})",
        lambda value: isinstance(value, str) and len(value) <= length,
    )


def matches(pattern: str | re.Pattern[str]) -> Check:
    """String matching ``pattern`` from its first character (``re.match``).

    Args:
        pattern: Regular expression, compiled once here when given as text.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return Check(
        f"matches({compiled.pattern})",
        lambda value: isinstance(value, str) and compiled.match(value) is not None,
    )


def is_in(choices: Iterable[Any]) -> Check:
    """Value is one of ``choices`` (compared by equality)."""
    allowed = frozenset(choices)
    return Check(f"is_in({sorted(map(str, allowed))})", lambda value: value in allowed)


# =============================================================================
# Sanitizers
# =============================================================================


def to_int(value: Any) -> Any:
    """Convert decimal strings ("12", "-3") to int; anything else is returned as is."""
    if isinstance(value, str) and re.fullmatch(r"-?\d+", value.strip()):
        return int(value.strip())
    return value


def to_boolean(value: Any) -> Any:
    """Convert "true"/"false"/"1"/"0" (any case) to bool; anything else unchanged."""
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
    return value


def upper(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value


# =============================================================================
# Rules and schemas
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class FieldRule:
    """Validation rule for a single request field.

    Attributes:
        name: Field name (also the key in the validated data).
        locations: Request parts searched in order; first hit wins.
        checks: Predicates run in order after sanitizing.
        sanitizer: Pure transform applied before the checks.
        custom: Custom validator ``(value, ctx) -> Result``, sync or async.
        message: Message reported when the field fails.
        optional: Absent optional fields are skipped (or defaulted).
        default: Value used when an optional field is absent.
        attach_as: Scratch key receiving the custom validator's success value.
        kind: FailureKind reported on failure.
        code: ErrorCode reported on failure (derived from the stage if None).
    """

    name: str
    locations: tuple[Location, ...] = (Location.BODY,)
    checks: tuple[Check, ...] = ()
    sanitizer: Sanitizer | None = None
    custom: CustomValidator | None = None
    message: str = "Invalid value"
    optional: bool = False
    default: Any = MISSING
    attach_as: str | None = None
    kind: FailureKind = FailureKind.VALIDATION
    code: ErrorCode | None = None

    def __post_init__(self) -> None:
        if not self.locations:
            raise ValueError(f"Rule {self.name!r} needs at least one location")
        if self.default is not MISSING and not self.optional:
            raise ValueError(f"Rule {self.name!r} has a default but is not optional")
        if self.attach_as is not None and self.custom is None:
            raise ValueError(f"Rule {self.name!r} attaches a value without a custom validator")


class ValidationSchema(Mapping[str, FieldRule]):
    """Immutable, ordered mapping of field name -> FieldRule.

    Raises:
        ValueError: If two rules share a name.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[FieldRule] = ()) -> None:
        ordered: dict[str, FieldRule] = {}
        for rule in rules:
            if rule.name in ordered:
                raise ValueError(f"Duplicate rule for field {rule.name!r}")
            ordered[rule.name] = rule
        self._rules = MappingProxyType(ordered)

    def __getitem__(self, name: str) -> FieldRule:
        return self._rules[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"ValidationSchema({list(self._rules)})"

    @property
    def rules(self) -> tuple[FieldRule, ...]:
        return tuple(self._rules.values())


def exclude(schema: ValidationSchema, *names: str) -> ValidationSchema:
    """New schema without the named fields; unknown names are ignored."""
    return ValidationSchema(rule for rule in schema.rules if rule.name not in names)


def with_identifier(schema: ValidationSchema, identifier: FieldRule) -> ValidationSchema:
    """New schema starting with ``identifier``.

    A base rule with the same name is dropped, so the identifier appears once
    and always runs first.
    """
    return ValidationSchema(
        [identifier, *(rule for rule in schema.rules if rule.name != identifier.name)]
    )


def pick(schema: ValidationSchema, *names: str) -> ValidationSchema:
    """New schema with only the named fields, in base order.

    Raises:
        KeyError: If a name is not in the schema.
    """
    for name in names:
        if name not in schema:
            raise KeyError(name)
    return ValidationSchema(rule for rule in schema.rules if rule.name in names)


def extend(schema: ValidationSchema, *others: Mapping[str, FieldRule]) -> ValidationSchema:
    """New schema with the rules of ``others`` appended.

    A later rule with an existing name replaces the earlier one in place.
    """
    merged: dict[str, FieldRule] = dict(schema)
    for other in others:
        merged.update(other)
    return ValidationSchema(merged.values())
