"""ClientRepository protocol for client persistence.

Port (interface) for hexagonal architecture. The SQLAlchemy adapter in
crud_backbone.infrastructure.persistence.repositories implements it.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from crud_backbone.core.errors import ConflictError, NotFoundError
from crud_backbone.core.result import Result
from crud_backbone.domain.entities.client import Client
from crud_backbone.domain.value_objects.pagination import PaginationParams


class ClientRepositoryProtocol(Protocol):
    """Client repository protocol (port).

    Methods:
        list: Page of clients plus total count of matching rows
        find_by_id: Retrieve client by ID
        find_by_field: Retrieve the single client whose field equals a value
        find_by_email: Retrieve client by e-mail
        insert: Create client (Conflict on duplicate e-mail)
        update: Overwrite client (NotFound if the row vanished)
        delete: Remove client (NotFound if absent)
    """

    async def list(self, params: PaginationParams) -> tuple[list[Client], int]:
        """Return the requested page and the total number of matching rows."""
        ...

    async def find_by_id(self, entity_id: int) -> Client | None:
        """Find client by ID."""
        ...

    async def find_by_field(self, field_name: str, value: Any) -> Client | None:
        """Find at most one client whose field equals value."""
        ...

    async def find_by_email(self, email: str) -> Client | None:
        """Find client by e-mail address."""
        ...

    async def insert(
        self, values: Mapping[str, Any]
    ) -> Result[Client, ConflictError]:
        """Create a client, assigning id and timestamps."""
        ...

    async def update(
        self, entity: Client
    ) -> Result[Client, NotFoundError | ConflictError]:
        """Persist the mutable fields of an existing client."""
        ...

    async def delete(self, entity_id: int) -> Result[int, NotFoundError]:
        """Delete a client by ID."""
        ...
