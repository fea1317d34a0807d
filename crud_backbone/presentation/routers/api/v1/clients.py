"""Clients resource handlers and controller.

Handlers run after the route's validators, so they read sanitized input from
``request.state.validated`` and the resolved client from the request scratch.

Handlers:
    list_clients - GET /clients
    get_client - GET /clients/{id}
    create_client - POST /clients
    update_client - PUT /clients
    delete_client - DELETE /clients/{id}
"""

from dataclasses import replace

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from crud_backbone.core.container import get_client_repository, get_logger
from crud_backbone.core.result import Failure, Success
from crud_backbone.domain.entities.client import Client
from crud_backbone.infrastructure.persistence.repositories import ClientRepository
from crud_backbone.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from crud_backbone.presentation.routers.api.v1.errors import ErrorResponseBuilder
from crud_backbone.presentation.routers.api.v1.responses import (
    success,
    success_created,
    success_empty,
    success_list,
)
from crud_backbone.presentation.routers.api.v1.routes.controller import Controller
from crud_backbone.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from crud_backbone.presentation.routers.api.v1.validators.clients import (
    CLIENT_CREATE_SCHEMA,
    CLIENT_ID_SCHEMA,
    CLIENT_LIST_SCHEMA,
    CLIENT_UPDATE_SCHEMA,
)
from crud_backbone.presentation.routers.api.validation import (
    list_params,
    validated_data,
    validator,
)
from crud_backbone.presentation.routers.api.validation.engine import request_scratch
from crud_backbone.schemas.client_schemas import (
    ClientEnvelope,
    ClientListEnvelope,
    ClientResponse,
)
from crud_backbone.schemas.common_schemas import EmptyEnvelope, IdEnvelope, PageMeta


def _serialize(client: Client) -> dict:
    return ClientResponse.from_entity(client).model_dump(mode="json")


async def list_clients(
    request: Request,
    client_repo: ClientRepository = Depends(get_client_repository),
) -> JSONResponse:
    """List clients.

    GET /clients → 200 OK

    Query: page, size, order, orderBy plus equality filters
    (name, email, phone, status).
    """
    params = list_params(request)
    rows, count = await client_repo.list(params)
    return success_list(
        [_serialize(client) for client in rows],
        count,
        meta=PageMeta.from_params(params).model_dump(),
    )


async def get_client(request: Request) -> JSONResponse:
    """Get one client.

    GET /clients/{id} → 200 OK (404 when the id does not resolve)
    """
    client: Client = request_scratch(request)["client"]
    return success(_serialize(client))


async def create_client(
    request: Request,
    client_repo: ClientRepository = Depends(get_client_repository),
) -> JSONResponse:
    """Create a client.

    POST /clients → 201 Created

    ``status`` defaults to true. Unknown body fields are ignored. A duplicate
    e-mail that slips past the pre-check (concurrent insert) is reported as
    422 on ``email``.
    """
    data = validated_data(request)
    result = await client_repo.insert(
        {
            "name": data["name"],
            "email": data["email"],
            "phone": data["phone"],
            "status": data.get("status", True),
        }
    )

    match result:
        case Success(value=client):
            return success_created(_serialize(client))
        case Failure(error=error):
            get_logger().warning(
                "Client insert conflict",
                conflicting_field=error.conflicting_field,
            )
            return ErrorResponseBuilder.from_domain_error(
                error, request, trace_id=get_trace_id()
            )


async def update_client(
    request: Request,
    client_repo: ClientRepository = Depends(get_client_repository),
) -> JSONResponse:
    """Overwrite a client.

    PUT /clients → 200 OK with ``{"data": null}``

    ``id`` and ``created_at`` are kept; ``status`` keeps its stored value
    when omitted. A client deleted after validation yields 404.
    """
    data = validated_data(request)
    current: Client = request_scratch(request)["client"]
    changed = replace(
        current,
        name=data["name"],
        email=data["email"],
        phone=data["phone"],
        status=data.get("status", current.status),
    )

    match await client_repo.update(changed):
        case Success():
            return success_empty()
        case Failure(error=error):
            get_logger().warning(
                "Client update failed",
                client_id=current.id,
                error_code=error.code.value,
            )
            return ErrorResponseBuilder.from_domain_error(
                error, request, trace_id=get_trace_id()
            )


async def delete_client(
    request: Request,
    client_repo: ClientRepository = Depends(get_client_repository),
) -> JSONResponse:
    """Delete a client.

    DELETE /clients/{id} → 200 OK with ``{"data": id}``
    """
    client: Client = request_scratch(request)["client"]

    match await client_repo.delete(client.id):
        case Success(value=deleted_id):
            return success(deleted_id)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, trace_id=get_trace_id()
            )


class ClientController(Controller):
    """Routes of the clients resource (all public)."""

    prefix = "/clients"
    resource = "clients"
    tags = ("Clients",)

    @classmethod
    def routes(cls) -> list[RouteMetadata]:
        not_found = ErrorSpec(status=404, description="Client not found")
        invalid = ErrorSpec(status=422, description="Validation failed")

        return [
            cls.route(
                HTTPMethod.GET,
                "",
                list_clients,
                summary="List clients",
                operation_id="list_clients",
                response_model=ClientListEnvelope,
                errors=[invalid],
                middlewares=[validator(CLIENT_LIST_SCHEMA)],
            ),
            cls.route(
                HTTPMethod.GET,
                "/{id}",
                get_client,
                summary="Get client",
                operation_id="get_client",
                response_model=ClientEnvelope,
                errors=[not_found],
                middlewares=[validator(CLIENT_ID_SCHEMA)],
            ),
            cls.route(
                HTTPMethod.POST,
                "",
                create_client,
                summary="Create client",
                operation_id="create_client",
                response_model=ClientEnvelope,
                status_code=201,
                errors=[invalid],
                middlewares=[validator(CLIENT_CREATE_SCHEMA)],
            ),
            cls.route(
                HTTPMethod.PUT,
                "",
                update_client,
                summary="Update client",
                operation_id="update_client",
                response_model=EmptyEnvelope,
                errors=[not_found, invalid],
                middlewares=[validator(CLIENT_UPDATE_SCHEMA)],
            ),
            cls.route(
                HTTPMethod.DELETE,
                "/{id}",
                delete_client,
                summary="Delete client",
                operation_id="delete_client",
                response_model=IdEnvelope,
                errors=[not_found],
                middlewares=[validator(CLIENT_ID_SCHEMA)],
            ),
        ]
