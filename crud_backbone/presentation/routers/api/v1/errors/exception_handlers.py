"""Global exception handlers for FastAPI application.

Converts exceptions that escape handlers and dependencies into RFC 7807
Problem Details responses.

Handlers:
    request_validation_failed_handler: Rule engine failures (422/404)
    http_exception_handler: HTTPException (auth gate, routing 404/405)
    validation_exception_handler: FastAPI's own RequestValidationError
    generic_exception_handler: Catches all unhandled exceptions (500)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from crud_backbone.core.container import get_logger
from crud_backbone.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from crud_backbone.presentation.routers.api.v1.errors.error_response_builder import (
    VALIDATION_DETAIL,
    ErrorResponseBuilder,
)
from crud_backbone.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
)
from crud_backbone.presentation.routers.api.validation.engine import (
    RequestValidationFailed,
)
from crud_backbone.presentation.routers.api.validation.schema import FailureKind


def _trace_id(request: Request) -> str | None:
    """Trace ID from context, or from request.state outside TraceMiddleware."""
    return get_trace_id() or getattr(request.state, "trace_id", None)


async def request_validation_failed_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert rule engine failures to Problem Details.

    All field failures are listed in validation order. The status is 404 when
    any failing rule is an identifier rule, 422 otherwise.

    Example:
        >>> # POST /clients {"name": "ab", "email": "x", "phone": "1"}
        >>> # {
        >>> #   "status": 422,
        >>> #   "errors": [
        >>> #     {"field": "name", "code": "validation_failed", "message": "Invalid name"},
        >>> #     {"field": "email", ...},
        >>> #     {"field": "phone", ...}
        >>> #   ],
        >>> #   ...
        >>> # }
    """
    assert isinstance(exc, RequestValidationFailed)

    status_code = exc.status_code
    detail = VALIDATION_DETAIL
    if status_code == status.HTTP_404_NOT_FOUND:
        detail = next(
            error.message for error in exc.errors if error.kind == FailureKind.NOT_FOUND
        )

    return ErrorResponseBuilder.build(
        status_code=status_code,
        detail=detail,
        request=request,
        errors=[
            ErrorDetail(field=error.field, code=error.code.value, message=error.message)
            for error in exc.errors
        ],
        trace_id=_trace_id(request),
    )


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 7807 Problem Details response.

    401 responses carry a field-level error on ``authorization``.

    Example:
        >>> # When the auth gate raises HTTPException:
        >>> raise HTTPException(status_code=401, detail="Invalid access key")
        >>> # {
        >>> #   "title": "Authentication Required",
        >>> #   "status": 401,
        >>> #   "errors": [{"field": "authorization", ...}],
        >>> #   ...
        >>> # }
    """
    assert isinstance(exc, StarletteHTTPException)

    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)

    errors = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        errors = [
            ErrorDetail(field="authorization", code="authentication_failed", message=detail)
        ]

    # Preserve any headers from HTTPException (e.g., WWW-Authenticate)
    headers = getattr(exc, "headers", None)

    return ErrorResponseBuilder.build(
        status_code=exc.status_code,
        detail=detail,
        request=request,
        errors=errors,
        trace_id=_trace_id(request),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to RFC 7807 Problem Details response.

    Only reachable for handlers that declare pydantic parameters; rule engine
    validators report through request_validation_failed_handler.
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "email"] -> "email"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in ("body", "query", "path")]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return ErrorResponseBuilder.build(
        status_code=422,
        detail=VALIDATION_DETAIL,
        request=request,
        errors=field_errors,
        trace_id=_trace_id(request),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and returns an opaque 500; nothing about the failure
    reaches the caller except the trace ID.
    """
    trace_id = _trace_id(request)

    get_logger().error(
        "Unhandled exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    return ErrorResponseBuilder.build(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        request=request,
        trace_id=trace_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    # Rule engine failures (validators in RouteMetadata.middlewares)
    app.add_exception_handler(RequestValidationFailed, request_validation_failed_handler)

    # HTTPException from the auth gate and Starlette routing (404/405)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Pydantic validation errors
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Catch-all for 500 errors
    app.add_exception_handler(Exception, generic_exception_handler)
