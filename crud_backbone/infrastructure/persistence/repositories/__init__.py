"""Repository implementations (adapters for the domain protocols)."""

from crud_backbone.infrastructure.persistence.repositories.application_repository import (
    ApplicationRepository,
)
from crud_backbone.infrastructure.persistence.repositories.base_repository import (
    SQLAlchemyRepository,
)
from crud_backbone.infrastructure.persistence.repositories.client_repository import (
    ClientRepository,
)

__all__ = [
    "SQLAlchemyRepository",
    "ClientRepository",
    "ApplicationRepository",
]
