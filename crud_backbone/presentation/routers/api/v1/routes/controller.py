"""Controller base class.

A controller groups the routes of one resource under a path prefix. The
route table is an explicit list returned by ``routes()``; ``mount()`` hands it
to the generator exactly once.

Usage:
    class ClientController(Controller):
        prefix = "/clients"
        resource = "clients"
        tags = ("Clients",)

        @classmethod
        def routes(cls) -> list[RouteMetadata]:
            return [cls.route(HTTPMethod.GET, "", list_clients, summary="List clients")]

    ClientController().mount(router)
"""

from collections.abc import Callable, Sequence
from typing import Any, ClassVar

from fastapi import APIRouter

from crud_backbone.presentation.routers.api.v1.routes.generator import (
    RouteRegistrationError,
    register_routes_from_registry,
)
from crud_backbone.presentation.routers.api.v1.routes.metadata import (
    PUBLIC,
    AuthPolicy,
    HTTPMethod,
    RouteMetadata,
)


class Controller:
    """Base class for resource controllers.

    Class attributes:
        prefix: Path prefix of every route ("/clients").
        resource: Resource name used for grouping.
        tags: OpenAPI tags.
    """

    prefix: ClassVar[str] = ""
    resource: ClassVar[str] = ""
    tags: ClassVar[Sequence[str]] = ()

    def __init__(self) -> None:
        self._mounted = False

    @classmethod
    def routes(cls) -> list[RouteMetadata]:
        """Route table of the controller, in registration order."""
        raise NotImplementedError(f"{cls.__name__} must define routes()")

    @classmethod
    def route(
        cls,
        method: HTTPMethod,
        path: str,
        handler: Callable[..., Any],
        *,
        summary: str,
        middlewares: Sequence[Callable[..., Any]] = (),
        auth_policy: AuthPolicy = PUBLIC,
        **options: Any,
    ) -> RouteMetadata:
        """RouteMetadata with the controller's resource and tags filled in."""
        return RouteMetadata(
            method=method,
            path=path,
            handler=handler,
            resource=cls.resource,
            tags=list(cls.tags),
            summary=summary,
            auth_policy=auth_policy,
            middlewares=tuple(middlewares),
            **options,
        )

    def mount(self, router: APIRouter) -> list[str]:
        """Register the route table on ``router``.

        Returns:
            "METHOD /path" keys of the registered routes.

        Raises:
            RouteRegistrationError: If this controller is already mounted or a
                route clashes with one already on the router.
        """
        if self._mounted:
            raise RouteRegistrationError(f"{type(self).__name__} is already mounted")

        registered = register_routes_from_registry(
            router, self.routes(), prefix=self.prefix
        )
        self._mounted = True
        return registered
