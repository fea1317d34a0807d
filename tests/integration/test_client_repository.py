"""Integration tests for ClientRepository (SQLAlchemyRepository over clients).

Tests cover:
- insert: assigned id/timestamps, unique e-mail conflict
- find_by_id / find_by_email / find_by_field
- update: keeps id and created_at, advances updated_at, NotFound
- delete: NotFound on unknown and repeated deletes
- list: count ignores paging, ordering with id tie-break, filters

Architecture:
- Real SQLite database per test (aiosqlite)
"""

from dataclasses import replace

import pytest

from crud_backbone.core.enums import ErrorCode
from crud_backbone.core.errors import ConflictError, NotFoundError
from crud_backbone.core.result import Failure, Success
from crud_backbone.domain.value_objects.pagination import PaginationParams, SortOrder
from crud_backbone.infrastructure.persistence.repositories import ClientRepository


def client_values(index: int, **overrides) -> dict:
    values = {
        "name": f"Client {index:02d}",
        "email": f"client{index}@example.com",
        "phone": "(34) 99999-9999",
        "status": True,
    }
    values.update(overrides)
    return values


@pytest.fixture
def repo(session) -> ClientRepository:
    return ClientRepository(session=session)


async def insert(repo: ClientRepository, index: int, **overrides):
    result = await repo.insert(client_values(index, **overrides))
    assert isinstance(result, Success)
    return result.value


@pytest.mark.integration
class TestClientRepositoryInsert:
    """Test insert."""

    async def test_insert_assigns_id_and_timestamps(self, repo):
        client = await insert(repo, 1)

        assert client.id == 1
        assert client.name == "Client 01"
        assert client.status is True
        assert client.created_at is not None
        assert client.updated_at is not None

    async def test_ids_follow_insertion_order(self, repo):
        first = await insert(repo, 1)
        second = await insert(repo, 2)

        assert second.id > first.id

    async def test_duplicate_email_is_conflict(self, repo):
        await insert(repo, 1)

        result = await repo.insert(client_values(2, email="client1@example.com"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.conflicting_field == "email"
        assert result.error.code == ErrorCode.RESOURCE_CONFLICT

    async def test_session_usable_after_conflict(self, repo):
        await insert(repo, 1)
        await repo.insert(client_values(2, email="client1@example.com"))

        client = await insert(repo, 3)

        assert client.email == "client3@example.com"

    async def test_ignores_non_writable_keys(self, repo):
        client = await insert(repo, 1, id=99, nickname="c1")

        assert client.id == 1


@pytest.mark.integration
class TestClientRepositoryFind:
    """Test lookups."""

    async def test_find_by_id(self, repo):
        stored = await insert(repo, 1)

        found = await repo.find_by_id(stored.id)

        assert found == stored

    async def test_find_by_id_unknown(self, repo):
        assert await repo.find_by_id(404) is None

    async def test_find_by_email(self, repo):
        stored = await insert(repo, 1)

        assert (await repo.find_by_email("client1@example.com")).id == stored.id
        assert await repo.find_by_email("nobody@example.com") is None

    async def test_find_by_field(self, repo):
        await insert(repo, 1, name="Ana")
        second = await insert(repo, 2, name="Bea")

        found = await repo.find_by_field("name", "Bea")

        assert found.id == second.id

    async def test_find_by_field_rejects_unknown_field(self, repo):
        with pytest.raises(ValueError, match="no field"):
            await repo.find_by_field("password", "x")


@pytest.mark.integration
class TestClientRepositoryUpdate:
    """Test update."""

    async def test_update_overwrites_fields(self, repo):
        stored = await insert(repo, 1)

        result = await repo.update(replace(stored, name="Renamed", status=False))

        assert isinstance(result, Success)
        assert result.value.name == "Renamed"
        assert result.value.status is False
        assert (await repo.find_by_id(stored.id)).name == "Renamed"

    async def test_update_keeps_created_at_and_advances_updated_at(self, repo):
        stored = await insert(repo, 1)

        result = await repo.update(replace(stored, phone="(11) 3333-4444"))

        updated = result.value
        assert updated.id == stored.id
        assert updated.created_at == stored.created_at
        assert updated.updated_at > stored.updated_at

    async def test_update_unknown_id_is_not_found(self, repo):
        stored = await insert(repo, 1)

        result = await repo.update(replace(stored, id=999))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.resource_id == "999"

    async def test_update_to_taken_email_is_conflict(self, repo):
        await insert(repo, 1)
        second = await insert(repo, 2)

        result = await repo.update(replace(second, email="client1@example.com"))

        assert isinstance(result, Failure)
        assert result.error.conflicting_field == "email"


@pytest.mark.integration
class TestClientRepositoryDelete:
    """Test delete."""

    async def test_delete_removes_row(self, repo):
        stored = await insert(repo, 1)

        result = await repo.delete(stored.id)

        assert result == Success(value=stored.id)
        assert await repo.find_by_id(stored.id) is None

    async def test_delete_twice_is_not_found(self, repo):
        stored = await insert(repo, 1)
        await repo.delete(stored.id)

        result = await repo.delete(stored.id)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.message == "Client not found"


@pytest.mark.integration
class TestClientRepositoryList:
    """Test list (pagination, ordering, filters)."""

    async def test_empty_table(self, repo):
        rows, count = await repo.list(PaginationParams())

        assert rows == []
        assert count == 0

    async def test_count_ignores_page_window(self, repo):
        for index in range(1, 8):
            await insert(repo, index)

        rows, count = await repo.list(PaginationParams(page=1, size=3))

        assert count == 7
        assert [client.id for client in rows] == [4, 5, 6]

    async def test_page_past_the_end_is_empty(self, repo):
        for index in range(1, 4):
            await insert(repo, index)

        rows, count = await repo.list(PaginationParams(page=5, size=3))

        assert rows == []
        assert count == 3

    async def test_descending_order(self, repo):
        for index in range(1, 4):
            await insert(repo, index)

        rows, _ = await repo.list(PaginationParams(order=SortOrder.DESC))

        assert [client.id for client in rows] == [3, 2, 1]

    async def test_ties_broken_by_insertion_order(self, repo):
        await insert(repo, 1, name="Same")
        await insert(repo, 2, name="Other")
        await insert(repo, 3, name="Same")

        rows, _ = await repo.list(
            PaginationParams(order=SortOrder.DESC, order_by="name")
        )

        assert [client.id for client in rows] == [1, 3, 2]

    async def test_equality_filters(self, repo):
        await insert(repo, 1, status=True)
        await insert(repo, 2, status=False)
        await insert(repo, 3, status=False)

        rows, count = await repo.list(PaginationParams(filters={"status": False}))

        assert count == 2
        assert [client.id for client in rows] == [2, 3]

    async def test_unknown_sort_field_raises(self, repo):
        with pytest.raises(ValueError, match="Cannot sort"):
            await repo.list(PaginationParams(order_by="password"))

    async def test_unknown_filter_raises(self, repo):
        with pytest.raises(ValueError, match="Cannot filter"):
            await repo.list(PaginationParams(filters={"created_at": None}))
