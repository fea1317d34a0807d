"""Error response builder for RFC 7807 Problem Details.

Builds error envelopes from domain errors (repository outcomes) and from
field failures accumulated by the rule engine.

Status mapping:
    ValidationError -> 422
    NotFoundError -> 404 (field-level error on the identifier field)
    ConflictError -> 422 (field-level error on the conflicting field)
    AuthenticationError -> 401 (field ``authorization``)
    anything else -> 500

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from collections.abc import Sequence

from fastapi import Request, status
from fastapi.responses import JSONResponse

from crud_backbone.core.config import settings
from crud_backbone.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from crud_backbone.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code -> (title, slug) for the problem ``type`` URI
HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}

VALIDATION_DETAIL = "Request validation failed. Check 'errors' for details."


def status_title(status_code: int) -> str:
    """Human-readable title for an HTTP status code."""
    return HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def status_slug(status_code: int) -> str:
    """Kebab-case slug for the problem ``type`` URI."""
    return HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> match await client_repo.delete(client_id):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(
        ...             error, request, trace_id=get_trace_id()
        ...         )
    """

    @staticmethod
    def build(
        *,
        status_code: int,
        detail: str,
        request: Request,
        errors: Sequence[ErrorDetail] | None = None,
        trace_id: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Assemble a ProblemDetails JSON response.

        Args:
            status_code: HTTP status (also written to the body).
            detail: Occurrence-specific explanation.
            request: Request whose path becomes ``instance``.
            errors: Field-level errors, omitted from the body when empty.
            trace_id: Request trace ID.
            headers: Extra response headers.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{status_slug(status_code)}",
            title=status_title(status_code),
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            errors=list(errors) if errors else None,
            trace_id=trace_id,
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None = None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Domain error returned inside a Failure.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with ProblemDetails content.

        Example:
            >>> error = NotFoundError(
            ...     code=ErrorCode.RESOURCE_NOT_FOUND,
            ...     message="Client not found",
            ...     resource_type="Client",
            ...     resource_id="42",
            ... )
            >>> response = ErrorResponseBuilder.from_domain_error(error, request)
            >>> # Returns 404 with an error on field "id"
        """
        status_code = ErrorResponseBuilder._get_status_code(error)
        field = ErrorResponseBuilder._get_field(error)

        errors = None
        if field is not None:
            errors = [
                ErrorDetail(field=field, code=error.code.value, message=error.message)
            ]

        detail = VALIDATION_DETAIL if status_code == 422 else error.message
        return ErrorResponseBuilder.build(
            status_code=status_code,
            detail=detail,
            request=request,
            errors=errors,
            trace_id=trace_id,
        )

    @staticmethod
    def _get_status_code(error: DomainError) -> int:
        """Map domain error type to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(conflict_error)
            422
        """
        match error:
            case ValidationError() | ConflictError():
                return 422
            case NotFoundError():
                return status.HTTP_404_NOT_FOUND
            case AuthenticationError():
                return status.HTTP_401_UNAUTHORIZED
            case _:
                return status.HTTP_500_INTERNAL_SERVER_ERROR

    @staticmethod
    def _get_field(error: DomainError) -> str | None:
        """Field named by a field-level error, None for request-level errors."""
        match error:
            case ValidationError(field=field):
                return field
            case NotFoundError(field=field):
                return field
            case ConflictError(conflicting_field=field):
                return field
            case AuthenticationError():
                return "authorization"
            case _:
                return None
