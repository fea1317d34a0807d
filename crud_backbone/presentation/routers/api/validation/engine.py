"""Rule engine: runs a ValidationSchema against one request.

Every rule runs, in declaration order, and failures accumulate; there is no
short-circuit across fields. Per rule:

    locate -> absent? -> sanitize -> checks -> custom validator -> attach

Custom validators may be sync or async. Async ones are awaited one at a time
on the request's task, so the request session is never used concurrently. A
custom validator that raises is reported as a failure of its field.

Usage (FastAPI route dependency):
    RouteMetadata(..., middlewares=[validator(CLIENT_CREATE_SCHEMA)])

    async def create_client(request: Request):
        data = validated_data(request)
"""

import inspect
import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backbone.core.container import get_db_session, get_logger
from crud_backbone.core.enums import ErrorCode
from crud_backbone.core.result import Failure, Success
from crud_backbone.domain.protocols.logger_protocol import LoggerProtocol
from crud_backbone.presentation.routers.api.validation.context import RequestContext
from crud_backbone.presentation.routers.api.validation.schema import (
    MISSING,
    FailureKind,
    FieldRule,
    ValidationSchema,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldFailure:
    """One failed field.

    Attributes:
        field: Field name.
        code: Machine-readable error code.
        message: Human-readable message (the rule message or the custom one).
        kind: Decides the response status (404 for NOT_FOUND, else 422).
    """

    field: str
    code: ErrorCode
    message: str
    kind: FailureKind = FailureKind.VALIDATION


@dataclass(kw_only=True)
class ValidationReport:
    """Outcome of validate_request.

    Attributes:
        data: Sanitized values of the fields that passed (schema fields only).
        errors: Failures in declaration order.
    """

    data: dict[str, Any] = field(default_factory=dict)
    errors: list[FieldFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def status_code(self) -> int:
        return _status_for(self.errors)


class RequestValidationFailed(Exception):
    """Raised by request validators; rendered as a Problem Details envelope."""

    def __init__(self, errors: list[FieldFailure]) -> None:
        super().__init__(f"{len(errors)} field(s) failed validation")
        self.errors = errors

    @property
    def status_code(self) -> int:
        return _status_for(self.errors)


def _status_for(errors: list[FieldFailure]) -> int:
    if any(error.kind == FailureKind.NOT_FOUND for error in errors):
        return status.HTTP_404_NOT_FOUND
    return 422


def _failure(rule: FieldRule, stage_code: ErrorCode, message: str) -> FieldFailure:
    if rule.code is not None:
        code = rule.code
    elif rule.kind == FailureKind.NOT_FOUND:
        code = ErrorCode.RESOURCE_NOT_FOUND
    else:
        code = stage_code
    return FieldFailure(field=rule.name, code=code, message=message, kind=rule.kind)


async def _apply_rule(
    rule: FieldRule,
    ctx: RequestContext,
    report: ValidationReport,
    logger: LoggerProtocol,
) -> FieldFailure | None:
    value = ctx.lookup(rule.name, rule.locations)

    if value is MISSING:
        if not rule.optional:
            return _failure(rule, ErrorCode.FIELD_REQUIRED, rule.message)
        if rule.default is not MISSING:
            report.data[rule.name] = rule.default
        return None

    if rule.sanitizer is not None:
        value = rule.sanitizer(value)

    for check in rule.checks:
        if not check(value):
            return _failure(rule, ErrorCode.VALIDATION_FAILED, rule.message)

    if rule.custom is not None:
        try:
            outcome = rule.custom(value, ctx)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception as exc:
            logger.warning(
                "Custom validator raised",
                field=rule.name,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            return _failure(rule, ErrorCode.CUSTOM_CHECK_FAILED, rule.message)

        match outcome:
            case Success(value=attached):
                if rule.attach_as is not None:
                    ctx.scratch[rule.attach_as] = attached
            case Failure(error=message):
                return _failure(
                    rule,
                    ErrorCode.CUSTOM_CHECK_FAILED,
                    message if isinstance(message, str) and message else rule.message,
                )
            case _:
                logger.warning(
                    "Custom validator returned a non-Result value",
                    field=rule.name,
                    value_type=type(outcome).__name__,
                )
                return _failure(rule, ErrorCode.CUSTOM_CHECK_FAILED, rule.message)

    report.data[rule.name] = value
    return None


async def validate_request(
    schema: ValidationSchema,
    ctx: RequestContext,
    *,
    logger: LoggerProtocol | None = None,
) -> ValidationReport:
    """Run every rule of ``schema`` against ``ctx``.

    Args:
        schema: Rules in evaluation order.
        ctx: Request view; custom success values land in ``ctx.scratch``.
        logger: Logger for custom validator errors (container logger if None).

    Returns:
        ValidationReport with sanitized data and accumulated failures.
    """
    logger = logger or get_logger()
    report = ValidationReport()

    for rule in schema.rules:
        failure = await _apply_rule(rule, ctx, report, logger)
        if failure is not None:
            report.errors.append(failure)

    return report


async def read_json_body(request: Request) -> dict[str, Any]:
    """JSON object body of the request, or {} when absent or not an object."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def request_scratch(request: Request) -> dict[str, Any]:
    """Per-request scratch dict shared by validators and the handler."""
    scratch = getattr(request.state, "scratch", None)
    if scratch is None:
        scratch = {}
        request.state.scratch = scratch
    return scratch


def validated_data(request: Request) -> dict[str, Any]:
    """Sanitized values accumulated by the request's validators."""
    return getattr(request.state, "validated", None) or {}


def validator(schema: ValidationSchema) -> Callable[..., Awaitable[None]]:
    """Compile ``schema`` into a FastAPI dependency.

    The dependency never returns a value: on success it merges the sanitized
    data into ``request.state.validated``; on failure it raises
    RequestValidationFailed and the handler does not run.

    Args:
        schema: Rules to enforce.

    Returns:
        Async dependency for ``RouteMetadata.middlewares``.
    """

    async def validate(
        request: Request,
        session: AsyncSession = Depends(get_db_session),
    ) -> None:
        ctx = RequestContext(
            body=await read_json_body(request),
            query=request.query_params,
            path=request.path_params,
            session=session,
            scratch=request_scratch(request),
        )
        logger = get_logger()
        report = await validate_request(schema, ctx, logger=logger)

        if not report.is_valid:
            logger.debug(
                "Request validation failed",
                method=request.method,
                path=request.url.path,
                fields=[error.field for error in report.errors],
            )
            raise RequestValidationFailed(report.errors)

        merged = validated_data(request)
        merged.update(report.data)
        request.state.validated = merged

    return validate
