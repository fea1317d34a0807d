"""Request context handed to custom validators."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from crud_backbone.presentation.routers.api.validation.schema import (
    MISSING,
    Location,
)


@dataclass(kw_only=True)
class RequestContext:
    """Read-only view of one request plus a scratch area.

    Attributes:
        body: Parsed JSON body (empty when absent or not an object).
        query: Query string parameters (last value wins).
        path: Path parameters.
        session: Request-scoped database session (None outside a request).
        scratch: Values attached by custom validators for the handler.
    """

    body: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    path: Mapping[str, Any] = field(default_factory=dict)
    session: AsyncSession | None = None
    scratch: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.body = MappingProxyType(dict(self.body))
        self.query = MappingProxyType(dict(self.query))
        self.path = MappingProxyType(dict(self.path))

    def source(self, location: Location) -> Mapping[str, Any]:
        match location:
            case Location.BODY:
                return self.body
            case Location.QUERY:
                return self.query
            case Location.PATH:
                return self.path

    def lookup(self, name: str, locations: tuple[Location, ...]) -> Any:
        """Value of ``name`` from the first location that has it, else MISSING."""
        for location in locations:
            values = self.source(location)
            if name in values:
                return values[name]
        return MISSING
