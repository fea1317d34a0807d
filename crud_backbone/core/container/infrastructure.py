"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (connection pool)
- Logging (console, JSON outside development)

Request-scoped factories:
- Database session
- Token verifier (bound to the request session)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backbone.core.config import settings
from crud_backbone.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from crud_backbone.domain.protocols.logger_protocol import LoggerProtocol
    from crud_backbone.domain.protocols.token_verifier_protocol import (
        TokenVerifierProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.

    Note:
        The application lifespan calls ``close()`` on this instance at
        shutdown; tests override it through ``app.dependency_overrides``.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from crud_backbone.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session(
    db: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    One session per request, shared by validators and the handler (FastAPI
    caches dependencies within a request). Repositories commit their own
    writes; the session is rolled back on exception and always closed.

    Yields:
        Database session for request duration.

    Usage:
        from fastapi import Depends
        from sqlalchemy.ext.asyncio import AsyncSession

        async def handler(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with db.get_session() as session:
        yield session


async def get_token_verifier(
    session: AsyncSession = Depends(get_db_session),
) -> "TokenVerifierProtocol":
    """Get access-key verifier (request-scoped).

    Args:
        session: Database session for request duration.

    Returns:
        Verifier implementing TokenVerifierProtocol.
    """
    from crud_backbone.infrastructure.persistence.repositories import (
        ApplicationRepository,
    )
    from crud_backbone.infrastructure.security.application_key_verifier import (
        ApplicationKeyVerifier,
    )

    return ApplicationKeyVerifier(ApplicationRepository(session=session))
