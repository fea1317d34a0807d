"""Database seeding package.

Provides idempotent seeders that run automatically after Alembic migrations.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from seeds.application_seeder import seed_bootstrap_application

logger = structlog.get_logger(__name__)


async def run_all_seeders(session: AsyncSession) -> None:
    """Run all database seeders. Called after Alembic migrations.

    Args:
        session: Async database session.
    """
    logger.info("seeding_started")

    await seed_bootstrap_application(session)

    logger.info("seeding_completed")


__all__ = ["run_all_seeders", "seed_bootstrap_application"]
