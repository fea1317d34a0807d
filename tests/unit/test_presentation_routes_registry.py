"""Unit tests for the route registry (metadata, generator, controllers).

Tests cover:
- Dependency chain: auth gate first, then middlewares in declared order
- Duplicate (method, path) detection, router left untouched
- Controller.mount() runs once
- Registry wiring of ClientController
"""

import pytest
from fastapi import APIRouter, Depends
from fastapi.routing import APIRoute

from crud_backbone.presentation.routers.api.middleware.auth_dependencies import (
    require_application,
)
from crud_backbone.presentation.routers.api.v1.clients import ClientController
from crud_backbone.presentation.routers.api.v1.routes import (
    AUTHENTICATED,
    PUBLIC,
    Controller,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
    RouteRegistrationError,
    register_routes_from_registry,
)
from crud_backbone.presentation.routers.api.v1.routes.generator import (
    _build_dependencies,
    _build_responses,
)
from crud_backbone.presentation.routers.api.v1.routes.registry import (
    build_v1_router,
    route_registry,
)


async def handler() -> dict:
    return {}


async def first_middleware() -> None:
    return None


async def second_middleware() -> None:
    return None


def metadata(method=HTTPMethod.GET, path="", **options) -> RouteMetadata:
    options.setdefault("auth_policy", PUBLIC)
    return RouteMetadata(
        method=method,
        path=path,
        handler=handler,
        resource="widgets",
        tags=["Widgets"],
        summary="Widget route",
        **options,
    )


class WidgetController(Controller):
    prefix = "/widgets"
    resource = "widgets"
    tags = ("Widgets",)

    @classmethod
    def routes(cls) -> list[RouteMetadata]:
        return [
            cls.route(HTTPMethod.GET, "", handler, summary="List widgets"),
            cls.route(
                HTTPMethod.DELETE,
                "/{id}",
                handler,
                summary="Delete widget",
                auth_policy=AUTHENTICATED,
                middlewares=[first_middleware],
            ),
        ]


@pytest.mark.unit
class TestDependencyChain:
    """Test _build_dependencies ordering."""

    def test_public_route_has_only_middlewares(self):
        chain = _build_dependencies(
            metadata(middlewares=(first_middleware, second_middleware))
        )

        assert [dep.dependency for dep in chain] == [first_middleware, second_middleware]

    def test_authenticated_route_starts_with_gate(self):
        chain = _build_dependencies(
            metadata(auth_policy=AUTHENTICATED, middlewares=(first_middleware,))
        )

        assert [dep.dependency for dep in chain] == [require_application, first_middleware]

    def test_route_without_middlewares(self):
        assert _build_dependencies(metadata()) == []

    def test_build_responses(self):
        responses = _build_responses([ErrorSpec(status=404, description="Not found")])

        assert responses == {404: {"description": "Not found"}}


@pytest.mark.unit
class TestRegisterRoutes:
    """Test register_routes_from_registry."""

    def test_registers_with_prefix_and_returns_keys(self):
        router = APIRouter(prefix="/api")

        keys = register_routes_from_registry(
            router,
            [metadata(), metadata(HTTPMethod.POST)],
            prefix="/widgets",
        )

        assert keys == ["GET /api/widgets", "POST /api/widgets"]
        assert [route.path for route in router.routes] == ["/api/widgets", "/api/widgets"]

    def test_same_path_different_method_is_allowed(self):
        router = APIRouter()

        keys = register_routes_from_registry(
            router, [metadata(HTTPMethod.GET, "/{id}"), metadata(HTTPMethod.DELETE, "/{id}")]
        )

        assert len(keys) == 2

    def test_duplicate_in_registry_raises_before_registering(self):
        router = APIRouter()

        with pytest.raises(RouteRegistrationError, match="GET /widgets"):
            register_routes_from_registry(
                router,
                [metadata(HTTPMethod.POST), metadata(), metadata()],
                prefix="/widgets",
            )

        assert router.routes == []

    def test_duplicate_of_existing_route_raises(self):
        router = APIRouter()
        register_routes_from_registry(router, [metadata()], prefix="/widgets")

        with pytest.raises(RouteRegistrationError):
            register_routes_from_registry(router, [metadata()], prefix="/widgets")

        assert len(router.routes) == 1

    def test_route_carries_declared_options(self):
        router = APIRouter()
        register_routes_from_registry(
            router,
            [metadata(HTTPMethod.POST, status_code=201, operation_id="create_widget")],
            prefix="/widgets",
        )

        route = router.routes[0]
        assert isinstance(route, APIRoute)
        assert route.status_code == 201
        assert route.operation_id == "create_widget"
        assert route.methods == {"POST"}


@pytest.mark.unit
class TestController:
    """Test Controller base class."""

    def test_route_fills_resource_and_tags(self):
        routes = WidgetController.routes()

        assert all(route.resource == "widgets" for route in routes)
        assert all(list(route.tags) == ["Widgets"] for route in routes)
        assert routes[0].is_public
        assert not routes[1].is_public

    def test_mount_registers_routes(self):
        router = APIRouter()

        keys = WidgetController().mount(router)

        assert keys == ["GET /widgets", "DELETE /widgets/{id}"]

    def test_mount_twice_raises(self):
        router = APIRouter()
        controller = WidgetController()
        controller.mount(router)

        with pytest.raises(RouteRegistrationError, match="already mounted"):
            controller.mount(APIRouter())

    def test_base_controller_has_no_routes(self):
        with pytest.raises(NotImplementedError):
            Controller.routes()

    def test_two_controllers_with_same_routes_clash(self):
        with pytest.raises(RouteRegistrationError):
            build_v1_router([WidgetController, WidgetController], prefix="")


@pytest.mark.unit
class TestClientControllerRegistry:
    """Test the routes declared by ClientController."""

    def test_declared_routes(self):
        declared = [(meta.method.value, path) for path, meta in route_registry()]

        assert declared == [
            ("GET", "/clients"),
            ("GET", "/clients/{id}"),
            ("POST", "/clients"),
            ("PUT", "/clients"),
            ("DELETE", "/clients/{id}"),
        ]

    def test_all_client_routes_are_public_and_validated(self):
        for _, meta in route_registry([ClientController]):
            assert meta.is_public
            assert len(meta.middlewares) == 1
            assert meta.operation_id is not None

    def test_build_v1_router_uses_prefix(self):
        router = build_v1_router(prefix="/api/v1")

        paths = {route.path for route in router.routes if isinstance(route, APIRoute)}
        assert paths == {"/api/v1/clients", "/api/v1/clients/{id}"}

    def test_depends_objects_are_fastapi_dependencies(self):
        chain = _build_dependencies(metadata(middlewares=(first_middleware,)))

        assert isinstance(chain[0], type(Depends(first_middleware)))
