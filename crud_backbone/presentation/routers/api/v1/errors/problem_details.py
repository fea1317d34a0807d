"""RFC 7807 Problem Details for HTTP APIs.

Every error response of the API uses this envelope. ``status`` repeats the
HTTP status code in the body and ``errors`` lists the field-level failures in
the order the fields were validated.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message

    Examples:
        >>> error = ErrorDetail(
        ...     field="email",
        ...     code="custom_check_failed",
        ...     message="Email already registered",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/not-found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Client not found",
        ...     instance="/clients/42",
        ...     errors=[
        ...         ErrorDetail(
        ...             field="id",
        ...             code="client_not_found",
        ...             message="Client not found",
        ...         )
        ...     ],
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/validation-failed"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Validation Failed"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[422],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Request validation failed. Check 'errors' for details."],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/clients"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
