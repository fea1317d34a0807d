"""Controller registry.

CONTROLLERS lists every controller served by API v1, in mount order.
build_v1_router() is the bootstrap helper used by the application factory.

Usage:
    app.include_router(build_v1_router())
"""

from collections.abc import Sequence

from fastapi import APIRouter

from crud_backbone.core.config import settings
from crud_backbone.presentation.routers.api.v1.clients import ClientController
from crud_backbone.presentation.routers.api.v1.routes.controller import Controller
from crud_backbone.presentation.routers.api.v1.routes.metadata import RouteMetadata

CONTROLLERS: tuple[type[Controller], ...] = (ClientController,)


def build_v1_router(
    controllers: Sequence[type[Controller]] = CONTROLLERS,
    *,
    prefix: str | None = None,
) -> APIRouter:
    """Mount every controller on a fresh router.

    Args:
        controllers: Controller classes to mount, in order.
        prefix: Router prefix (``settings.api_v1_prefix`` when None).

    Returns:
        APIRouter ready for ``app.include_router``.

    Raises:
        RouteRegistrationError: If two controllers declare the same route.
    """
    router = APIRouter(prefix=settings.api_v1_prefix if prefix is None else prefix)
    for controller_class in controllers:
        controller_class().mount(router)
    return router


def route_registry(
    controllers: Sequence[type[Controller]] = CONTROLLERS,
) -> list[tuple[str, RouteMetadata]]:
    """(full sub-path, metadata) for every declared route, for introspection."""
    return [
        (f"{controller_class.prefix}{metadata.path}", metadata)
        for controller_class in controllers
        for metadata in controller_class.routes()
    ]
