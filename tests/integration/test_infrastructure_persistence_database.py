"""Integration tests for Database (engine, sessions, schema helpers)."""

import pytest
from sqlalchemy import inspect, text

from crud_backbone.infrastructure.persistence.database import Database


@pytest.mark.integration
class TestDatabase:
    """Test Database against a SQLite file."""

    async def test_create_all_creates_tables(self, database):
        async with database.engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        assert {"clients", "applications"} <= set(tables)

    async def test_check_connection(self, database):
        assert await database.check_connection() is True

    async def test_check_connection_unreachable(self, tmp_path):
        broken = Database(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/db.sqlite")

        assert await broken.check_connection() is False
        await broken.close()

    async def test_session_rolls_back_on_error(self, database):
        with pytest.raises(RuntimeError):
            async with database.get_session() as session:
                await session.execute(
                    text(
                        "INSERT INTO applications (key, label, created_at, updated_at) "
                        "VALUES ('k', 'l', '2026-10-19 09:00:00', '2026-10-19 09:00:00')"
                    )
                )
                raise RuntimeError("boom")

        async with database.get_session() as session:
            count = (await session.execute(text("SELECT COUNT(*) FROM applications"))).scalar_one()

        assert count == 0
