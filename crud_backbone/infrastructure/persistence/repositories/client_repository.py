"""ClientRepository - SQLAlchemy implementation of ClientRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Client entities and database ClientModel.
"""

from sqlalchemy import select

from crud_backbone.domain.entities.client import Client
from crud_backbone.infrastructure.persistence.models.client import (
    Client as ClientModel,
)
from crud_backbone.infrastructure.persistence.repositories.base_repository import (
    SQLAlchemyRepository,
)


class ClientRepository(SQLAlchemyRepository[ClientModel, Client]):
    """SQLAlchemy implementation of ClientRepository protocol.

    This class does NOT inherit from ClientRepositoryProtocol (Protocol uses
    structural typing).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = ClientRepository(session)
        ...     client = await repo.find_by_email("ana@example.com")
    """

    model = ClientModel
    resource_type = "Client"
    writable_fields = ("name", "email", "phone", "status")
    unique_fields = ("email",)
    sortable_fields = frozenset(
        {"id", "name", "email", "phone", "status", "created_at", "updated_at"}
    )
    filterable_fields = frozenset({"name", "email", "phone", "status"})

    async def find_by_email(self, email: str) -> Client | None:
        """Find client by e-mail address (exact match).

        Args:
            email: Client's e-mail address.

        Returns:
            Domain Client entity if found, None otherwise.
        """
        stmt = select(ClientModel).where(ClientModel.email == email)
        result = await self.session.execute(stmt)
        client_model = result.scalar_one_or_none()

        if client_model is None:
            return None

        return self._to_domain(client_model)

    def _to_domain(self, client_model: ClientModel) -> Client:
        """Convert database model to domain entity.

        Args:
            client_model: SQLAlchemy ClientModel instance.

        Returns:
            Domain Client entity.
        """
        return Client(
            id=client_model.id,
            name=client_model.name,
            email=client_model.email,
            phone=client_model.phone,
            status=client_model.status,
            created_at=client_model.created_at,
            updated_at=client_model.updated_at,
        )
