"""Success response envelopes.

Every success response has the shape ``{"data": ..., "meta": ...}`` with
``meta`` omitted when there is nothing to say. Payloads go through
``jsonable_encoder``, so dataclass entities and datetimes serialize directly.

Exports:
    success, success_created, success_empty, success_list
"""

from collections.abc import Mapping, Sequence
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success(
    data: Any,
    *,
    meta: Mapping[str, Any] | None = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Wrap ``data`` (and optional ``meta``) in the success envelope.

    Example:
        >>> success({"id": 1}).body
        b'{"data":{"id":1}}'
    """
    content: dict[str, Any] = {"data": data}
    if meta is not None:
        content["meta"] = dict(meta)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def success_created(data: Any) -> JSONResponse:
    """201 Created with the stored entity."""
    return success(data, status_code=status.HTTP_201_CREATED)


def success_empty() -> JSONResponse:
    """200 OK with ``{"data": null}``."""
    return success(None)


def success_list(
    rows: Sequence[Any],
    count: int,
    *,
    meta: Mapping[str, Any] | None = None,
) -> JSONResponse:
    """200 OK with ``{"data": {"rows": [...], "count": N}}``.

    Args:
        rows: The requested page.
        count: Total matching rows, ignoring pagination.
        meta: Page window echo (page, size, order, orderBy).
    """
    return success({"rows": list(rows), "count": count}, meta=meta)
