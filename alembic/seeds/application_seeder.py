"""Bootstrap application seeder.

Registers the API consumer named by BOOTSTRAP_APPLICATION_KEY /
BOOTSTRAP_APPLICATION_LABEL so a fresh deployment has one usable access key.
Nothing is seeded when the key is unset. Idempotent via key uniqueness check.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backbone.core.config import settings
from crud_backbone.infrastructure.persistence.base import utc_now

logger = structlog.get_logger(__name__)


async def seed_bootstrap_application(session: AsyncSession) -> None:
    """Seed the bootstrap application if configured and missing.

    Args:
        session: Async database session.
    """
    key = settings.bootstrap_application_key
    if not key:
        logger.debug("bootstrap_application_skipped", reason="no key configured")
        return

    result = await session.execute(
        text("SELECT 1 FROM applications WHERE key = :key LIMIT 1"),
        {"key": key},
    )
    if result.fetchone() is not None:
        logger.debug("bootstrap_application_exists", label=settings.bootstrap_application_label)
        return

    now = utc_now()
    await session.execute(
        text(
            "INSERT INTO applications (key, label, created_at, updated_at) "
            "VALUES (:key, :label, :now, :now)"
        ),
        {"key": key, "label": settings.bootstrap_application_label, "now": now},
    )
    logger.info("bootstrap_application_seeded", label=settings.bootstrap_application_label)
