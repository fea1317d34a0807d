"""Pagination expressed as a validation schema.

List routes validate ``page``, ``size``, ``order`` and ``orderBy`` with the
same rule engine as every other request, then turn the validated data into
PaginationParams. Any other validated key is an equality filter.

Usage:
    CLIENT_LIST_SCHEMA = extend(
        pagination_schema(sortable=ClientRepository.sortable_fields),
        CLIENT_FILTERS,
    )

    async def list_clients(request: Request, ...):
        params = list_params(request)
"""

from collections.abc import Iterable
from typing import Any

from fastapi import Request

from crud_backbone.core.config import settings
from crud_backbone.core.enums import ErrorCode
from crud_backbone.domain.value_objects.pagination import PaginationParams, SortOrder
from crud_backbone.presentation.routers.api.validation.engine import validated_data
from crud_backbone.presentation.routers.api.validation.schema import (
    MAX_SQL_INTEGER,
    Check,
    FieldRule,
    Location,
    ValidationSchema,
    is_in,
    is_integer,
    is_string,
    to_int,
    upper,
)

PAGINATION_FIELDS = ("page", "size", "order", "orderBy")

# page * size must stay a valid SQL OFFSET for every accepted size
MAX_PAGE = MAX_SQL_INTEGER // settings.max_page_size


def pagination_schema(
    sortable: Iterable[str] | None = None,
    *,
    default_order_by: str = "id",
) -> ValidationSchema:
    """Build the page/size/order/orderBy rules.

    Args:
        sortable: Field names accepted by ``orderBy``; any string when None.
        default_order_by: ``orderBy`` used when the query does not send one.

    Returns:
        Schema reading from the query string only.
    """
    order_by_checks: tuple[Check, ...] = (is_string(),)
    if sortable is not None:
        order_by_checks = (is_string(), is_in(sortable))

    return ValidationSchema(
        [
            FieldRule(
                name="page",
                locations=(Location.QUERY,),
                sanitizer=to_int,
                checks=(is_integer(min_value=0, max_value=MAX_PAGE),),
                message=f"page must be an integer between 0 and {MAX_PAGE}",
                optional=True,
                default=0,
                code=ErrorCode.INVALID_PAGINATION,
            ),
            FieldRule(
                name="size",
                locations=(Location.QUERY,),
                sanitizer=to_int,
                checks=(is_integer(min_value=1, max_value=settings.max_page_size),),
                message=f"size must be an integer between 1 and {settings.max_page_size}",
                optional=True,
                default=settings.default_page_size,
                code=ErrorCode.INVALID_PAGINATION,
            ),
            FieldRule(
                name="order",
                locations=(Location.QUERY,),
                sanitizer=upper,
                checks=(is_in(order.value for order in SortOrder),),
                message="order must be ASC or DESC",
                optional=True,
                default=SortOrder.ASC.value,
                code=ErrorCode.INVALID_PAGINATION,
            ),
            FieldRule(
                name="orderBy",
                locations=(Location.QUERY,),
                checks=order_by_checks,
                message="orderBy is not a sortable field",
                optional=True,
                default=default_order_by,
                code=ErrorCode.INVALID_PAGINATION,
            ),
        ]
    )


PAGINATION_SCHEMA = pagination_schema()


def list_params(request: Request) -> PaginationParams:
    """PaginationParams from the request's validated data."""
    data = validated_data(request)
    filters: dict[str, Any] = {
        name: value for name, value in data.items() if name not in PAGINATION_FIELDS
    }
    return PaginationParams(
        page=data.get("page", 0),
        size=data.get("size", settings.default_page_size),
        order=SortOrder(data.get("order", SortOrder.ASC.value)),
        order_by=data.get("orderBy", "id"),
        filters=filters,
    )

