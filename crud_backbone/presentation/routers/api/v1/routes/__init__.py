"""API Route Registry package.

Modules:
    metadata: Core types (RouteMetadata, AuthPolicy, HTTPMethod, ErrorSpec)
    generator: register_routes_from_registry() - Generate FastAPI routes
    controller: Controller base class
    registry: CONTROLLERS and build_v1_router()

Usage:
    from crud_backbone.presentation.routers.api.v1.routes.registry import build_v1_router

    app.include_router(build_v1_router())
"""

from crud_backbone.presentation.routers.api.v1.routes.controller import Controller
from crud_backbone.presentation.routers.api.v1.routes.generator import (
    RouteRegistrationError,
    register_routes_from_registry,
)
from crud_backbone.presentation.routers.api.v1.routes.metadata import (
    AUTHENTICATED,
    PUBLIC,
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)

__all__ = [
    # Metadata types
    "RouteMetadata",
    "HTTPMethod",
    "AuthPolicy",
    "AuthLevel",
    "ErrorSpec",
    "PUBLIC",
    "AUTHENTICATED",
    # Registration
    "Controller",
    "RouteRegistrationError",
    "register_routes_from_registry",
]
