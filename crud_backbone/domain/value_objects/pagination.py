"""Pagination parameters for repository list queries.

Built from the request query string on every call and never persisted.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class SortOrder(str, Enum):
    """Sort direction for list queries."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True, kw_only=True)
class PaginationParams:
    """Page window, ordering and equality filters for a list query.

    Attributes:
        page: Zero-based page index.
        size: Rows per page (positive).
        order: Sort direction.
        order_by: Field used for ordering.
        filters: Field -> value equality filters.

    Raises:
        ValueError: If page is negative or size is not positive.

    Example:
        >>> params = PaginationParams(page=2, size=10, order_by="name")
        >>> params.offset
        20
    """

    page: int = 0
    size: int = 10
    order: SortOrder = SortOrder.ASC
    order_by: str = "id"
    filters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the window and freeze the filter mapping."""
        if self.page < 0:
            raise ValueError("page must be a non-negative integer")
        if self.size < 1:
            raise ValueError("size must be a positive integer")
        object.__setattr__(self, "filters", MappingProxyType(dict(self.filters)))

    @property
    def offset(self) -> int:
        """Index of the first row of the page."""
        return self.page * self.size
