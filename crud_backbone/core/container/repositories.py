"""Repository dependency factories.

Request-scoped repository instances for domain entity persistence.
Each request gets fresh repository instances with shared session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backbone.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from crud_backbone.infrastructure.persistence.repositories import (
        ApplicationRepository,
        ClientRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_client_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ClientRepository":
    """Get client repository (request-scoped).

    Creates new repository instance per request with database session.

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        ClientRepository instance.

    Usage:
        from fastapi import Depends

        async def get_client(
            client_repo: ClientRepository = Depends(get_client_repository),
        ):
            return await client_repo.find_by_id(client_id)
    """
    from crud_backbone.infrastructure.persistence.repositories import ClientRepository

    return ClientRepository(session=session)


async def get_application_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ApplicationRepository":
    """Get application repository (request-scoped)."""
    from crud_backbone.infrastructure.persistence.repositories import (
        ApplicationRepository,
    )

    return ApplicationRepository(session=session)
