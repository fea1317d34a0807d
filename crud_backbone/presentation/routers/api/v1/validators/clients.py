"""Client validation schemas.

CLIENT_SCHEMA is the base; the route variants are derived from it:

    CLIENT_CREATE_SCHEMA  base without ``id``          (POST /clients)
    CLIENT_UPDATE_SCHEMA  ``id`` first, then the base  (PUT /clients)
    CLIENT_ID_SCHEMA      ``id`` only                  (GET/DELETE /clients/{id})
    CLIENT_LIST_SCHEMA    pagination + filters         (GET /clients)

The ``id`` rule resolves the client and attaches it to the request scratch
as ``client``; any failure of that rule is reported as 404.
"""

from typing import Any

from crud_backbone.core.enums import ErrorCode
from crud_backbone.core.result import Failure, Result, Success
from crud_backbone.domain.entities.client import Client
from crud_backbone.domain.validators import first_upper_case
from crud_backbone.infrastructure.persistence.repositories import ClientRepository
from crud_backbone.presentation.routers.api.validation import (
    MAX_SQL_INTEGER,
    FailureKind,
    FieldRule,
    Location,
    RequestContext,
    ValidationSchema,
    exclude,
    extend,
    is_boolean,
    is_email,
    is_integer,
    is_phone,
    is_string,
    max_length,
    min_length,
    pagination_schema,
    pick,
    to_boolean,
    to_int,
    with_identifier,
)

ID_LOCATIONS = (Location.PATH, Location.BODY)


async def client_exists(value: Any, ctx: RequestContext) -> Result[Client, str]:
    """Resolve the identifier to a stored client."""
    client = await ClientRepository(session=ctx.session).find_by_id(value)
    if client is None:
        return Failure(error="Client not found")
    return Success(value=client)


async def email_available(value: Any, ctx: RequestContext) -> Result[str, str]:
    """Pass when no client has the e-mail, or the only one is being updated.

    The client being updated is the one the ``id`` rule resolved into the
    scratch; create schemas have no such rule, so any owner is a conflict.
    """
    existing = await ClientRepository(session=ctx.session).find_by_email(value)
    if existing is None:
        return Success(value=value)

    current: Client | None = ctx.scratch.get("client")
    if current is not None and current.id == existing.id:
        return Success(value=value)

    return Failure(error="Email already registered")


ID_RULE = FieldRule(
    name="id",
    locations=ID_LOCATIONS,
    sanitizer=to_int,
    checks=(is_integer(min_value=1, max_value=MAX_SQL_INTEGER),),
    custom=client_exists,
    attach_as="client",
    message="Client not found",
    kind=FailureKind.NOT_FOUND,
    code=ErrorCode.CLIENT_NOT_FOUND,
)

CLIENT_SCHEMA = ValidationSchema(
    [
        ID_RULE,
        FieldRule(
            name="name",
            sanitizer=first_upper_case,
            checks=(is_string(), min_length(3), max_length(255)),
            message="Invalid name",
        ),
        FieldRule(
            name="email",
            checks=(is_string(), max_length(255), is_email()),
            custom=email_available,
            message="Invalid email",
        ),
        FieldRule(
            name="phone",
            checks=(is_string(), is_phone()),
            message="Invalid phone",
        ),
        FieldRule(
            name="status",
            checks=(is_boolean(),),
            message="Invalid status",
            optional=True,
        ),
    ]
)

CLIENT_CREATE_SCHEMA = exclude(CLIENT_SCHEMA, "id")
CLIENT_UPDATE_SCHEMA = with_identifier(CLIENT_SCHEMA, ID_RULE)
CLIENT_ID_SCHEMA = pick(CLIENT_SCHEMA, "id")

# Equality filters accepted on GET /clients
CLIENT_FILTERS = ValidationSchema(
    [
        FieldRule(
            name="name",
            locations=(Location.QUERY,),
            checks=(is_string(),),
            message="Invalid name filter",
            optional=True,
        ),
        FieldRule(
            name="email",
            locations=(Location.QUERY,),
            checks=(is_string(),),
            message="Invalid email filter",
            optional=True,
        ),
        FieldRule(
            name="phone",
            locations=(Location.QUERY,),
            checks=(is_string(),),
            message="Invalid phone filter",
            optional=True,
        ),
        FieldRule(
            name="status",
            locations=(Location.QUERY,),
            sanitizer=to_boolean,
            checks=(is_boolean(),),
            message="Invalid status filter",
            optional=True,
        ),
    ]
)

CLIENT_LIST_SCHEMA = extend(
    pagination_schema(sortable=ClientRepository.sortable_fields),
    CLIENT_FILTERS,
)
