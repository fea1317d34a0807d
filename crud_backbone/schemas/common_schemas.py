"""Common response schemas shared by all resources.

Used for OpenAPI documentation of the success envelopes.
"""

from pydantic import BaseModel, Field

from crud_backbone.domain.value_objects.pagination import PaginationParams


class PageMeta(BaseModel):
    """Page window echoed in list responses.

    ``orderBy`` keeps the query-string spelling.
    """

    page: int = Field(..., ge=0, description="Zero-based page index")
    size: int = Field(..., ge=1, description="Rows per page")
    order: str = Field(..., description="Sort direction", examples=["ASC", "DESC"])
    orderBy: str = Field(..., description="Sort field", examples=["id", "name"])

    @classmethod
    def from_params(cls, params: PaginationParams) -> "PageMeta":
        return cls(
            page=params.page,
            size=params.size,
            order=params.order.value,
            orderBy=params.order_by,
        )


class EmptyEnvelope(BaseModel):
    """``{"data": null}``."""

    data: None = None


class IdEnvelope(BaseModel):
    """``{"data": <id>}`` (delete responses)."""

    data: int = Field(..., description="Identifier of the affected row")
