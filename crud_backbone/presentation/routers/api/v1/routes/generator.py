"""Route generator for the API Route Registry.

register_routes_from_registry() compiles RouteMetadata entries into FastAPI
routes. Each route gets an ordered dependency chain:

    [auth gate if not public] + [declared middlewares, in order] -> handler

FastAPI resolves route dependencies sequentially in list order, and an
exception raised by any link (401 from the gate, RequestValidationFailed
from a validator) stops the chain before the handler runs.

Functions:
    register_routes_from_registry: Generate routes from metadata
    _build_dependencies: Build FastAPI dependencies from auth policy + middlewares
    _build_responses: Build OpenAPI responses dict from error specs
"""

from collections.abc import Iterable
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.routing import APIRoute

from crud_backbone.core.container import get_logger
from crud_backbone.presentation.routers.api.middleware.auth_dependencies import (
    require_application,
)
from crud_backbone.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    ErrorSpec,
    RouteMetadata,
)


class RouteRegistrationError(Exception):
    """Raised when a route table cannot be registered (duplicates, remounts)."""


def _registered_keys(router: APIRouter) -> set[tuple[str, str]]:
    """(method, full path) pairs already on the router."""
    keys: set[tuple[str, str]] = set()
    for route in router.routes:
        if isinstance(route, APIRoute):
            keys.update((method, route.path) for method in route.methods)
    return keys


def register_routes_from_registry(
    router: APIRouter,
    registry: Iterable[RouteMetadata],
    *,
    prefix: str = "",
) -> list[str]:
    """Generate FastAPI routes from registry metadata.

    All entries are checked before any is registered, so a duplicate leaves
    the router untouched.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: RouteMetadata entries to convert into routes
        prefix: Controller prefix prepended to every entry path

    Returns:
        "METHOD /full/path" keys of the registered routes, in order.

    Raises:
        RouteRegistrationError: If a (method, path) pair is declared twice or
            already exists on the router.

    Example:
        >>> router = APIRouter()
        >>> register_routes_from_registry(router, ClientController.routes(), prefix="/clients")
        ['GET /clients', 'GET /clients/{id}', ...]
    """
    entries = list(registry)
    taken = _registered_keys(router)
    planned: list[tuple[RouteMetadata, str]] = []

    for metadata in entries:
        path = f"{prefix}{metadata.path}"
        key = (metadata.method.value, f"{router.prefix}{path}")
        if key in taken:
            raise RouteRegistrationError(f"Duplicate route: {key[0]} {key[1]}")
        taken.add(key)
        planned.append((metadata, path))

    logger = get_logger()
    registered: list[str] = []

    for metadata, path in planned:
        router.add_api_route(
            path=path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),  # Convert Sequence to list for FastAPI
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata.errors) if metadata.errors else None,
            dependencies=_build_dependencies(metadata),
        )
        route_key = f"{metadata.method.value} {router.prefix}{path}"
        registered.append(route_key)
        logger.debug(
            "Route registered",
            route=route_key,
            auth=metadata.auth_policy.level.value,
            middlewares=len(metadata.middlewares),
        )

    return registered


def _build_dependencies(metadata: RouteMetadata) -> list[Any]:
    """Build the ordered dependency chain of a route.

    Auth policy mapping:
        PUBLIC: declared middlewares only
        AUTHENTICATED: Depends(require_application) first, then middlewares

    Raises:
        ValueError: Unknown auth level (fail closed).
    """
    match metadata.auth_policy.level:
        case AuthLevel.PUBLIC:
            gate: list[Any] = []
        case AuthLevel.AUTHENTICATED:
            gate = [Depends(require_application)]
        case _:
            msg = f"Unknown auth level: {metadata.auth_policy.level}"
            raise ValueError(msg)

    return gate + [Depends(middleware) for middleware in metadata.middlewares]


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Client not found")])
        {404: {"description": "Client not found"}}
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        entry: dict[str, Any] = {"description": error.description}
        if error.model is not None:
            entry["model"] = error.model
        responses[error.status] = entry
    return responses
