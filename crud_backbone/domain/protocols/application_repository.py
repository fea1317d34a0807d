"""ApplicationRepository protocol for API consumer persistence."""

from collections.abc import Mapping
from typing import Any, Protocol

from crud_backbone.core.errors import ConflictError
from crud_backbone.core.result import Result
from crud_backbone.domain.entities.application import Application


class ApplicationRepositoryProtocol(Protocol):
    """Application repository protocol (port)."""

    async def find_by_key(self, key: str) -> Application | None:
        """Find application by access key."""
        ...

    async def insert(
        self, values: Mapping[str, Any]
    ) -> Result[Application, ConflictError]:
        """Register a new application."""
        ...
