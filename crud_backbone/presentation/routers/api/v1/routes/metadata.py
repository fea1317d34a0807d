"""Route metadata types for the API Route Registry.

Controllers describe their endpoints with RouteMetadata entries; the
generator turns those entries into FastAPI routes. Nothing is discovered by
reflection: a route exists exactly when a controller's ``routes()`` lists it.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, auth, middlewares)
    HTTPMethod: HTTP method enum (GET, POST, PUT, PATCH, DELETE)
    AuthPolicy / AuthLevel: Public route or authenticated application
    ErrorSpec: Error response specification for OpenAPI

Usage:
    RouteMetadata(
        method=HTTPMethod.POST,
        path="",
        handler=create_client,
        resource="clients",
        tags=["Clients"],
        summary="Create client",
        status_code=201,
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
        middlewares=[validator(CLIENT_CREATE_SCHEMA)],
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required
        AUTHENTICATED: Requires a registered application access key
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Attributes:
        level: Authentication level (public, authenticated)
        rationale: Optional note on why a route is public

    Examples:
        >>> AuthPolicy(level=AuthLevel.PUBLIC)
        >>> AuthPolicy(level=AuthLevel.AUTHENTICATED)
    """

    level: AuthLevel
    rationale: str | None = None


PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)
AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Examples:
        >>> ErrorSpec(status=404, description="Client not found")
        >>> ErrorSpec(status=422, description="Validation failed")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method (GET, POST, etc.)
        path: Sub-path relative to the controller prefix ("" or "/{id}")
        handler: Async function that implements the endpoint (last link)

    Grouping fields:
        resource: Resource category (e.g., "clients")
        tags: OpenAPI tags (e.g., ["Clients"])

    OpenAPI documentation:
        summary, description, operation_id, response_model, errors

    Behavior:
        status_code: Expected success status (e.g., 200, 201)
        auth_policy: Public or authenticated
        middlewares: Ordered FastAPI dependencies run after the auth gate
            and before the handler (request validators)
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None
    response_model: type[BaseModel] | None = None
    errors: list[ErrorSpec] | None = None

    # Behavior
    status_code: int = 200
    auth_policy: AuthPolicy
    middlewares: Sequence[Callable[..., Any]] = field(default_factory=tuple)

    @property
    def is_public(self) -> bool:
        return self.auth_policy.level == AuthLevel.PUBLIC
