"""Integration tests for the client validation schemas.

The schemas run through validate_request with a RequestContext bound to a
real session, exactly as the route validators do.
"""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from crud_backbone.core.enums import ErrorCode
from crud_backbone.infrastructure.persistence.repositories import ClientRepository
from crud_backbone.presentation.routers.api.v1.validators.clients import (
    CLIENT_CREATE_SCHEMA,
    CLIENT_ID_SCHEMA,
    CLIENT_LIST_SCHEMA,
    CLIENT_UPDATE_SCHEMA,
)
from crud_backbone.presentation.routers.api.validation import (
    RequestContext,
    validate_request,
)

VALID_BODY = {"name": "ana", "email": "ana@example.com", "phone": "(34) 99999-9999"}


@pytest_asyncio.fixture
async def stored_client(session):
    result = await ClientRepository(session=session).insert(
        {"name": "Bea", "email": "bea@example.com", "phone": "(11) 3333-4444", "status": True}
    )
    return result.value


async def validate(schema, session, **parts):
    ctx = RequestContext(session=session, **parts)
    report = await validate_request(schema, ctx, logger=MagicMock())
    return report, ctx


@pytest.mark.integration
class TestCreateSchema:
    """Test CLIENT_CREATE_SCHEMA."""

    async def test_valid_body_is_sanitized(self, session):
        report, _ = await validate(CLIENT_CREATE_SCHEMA, session, body=VALID_BODY)

        assert report.is_valid
        assert report.data == {
            "name": "Ana",
            "email": "ana@example.com",
            "phone": "(34) 99999-9999",
        }

    async def test_id_is_not_validated_on_create(self, session):
        report, _ = await validate(
            CLIENT_CREATE_SCHEMA, session, body={**VALID_BODY, "id": "abc"}
        )

        assert report.is_valid
        assert "id" not in report.data

    async def test_taken_email_fails_with_message(self, session, stored_client):
        report, _ = await validate(
            CLIENT_CREATE_SCHEMA, session, body={**VALID_BODY, "email": stored_client.email}
        )

        assert [(e.field, e.code, e.message) for e in report.errors] == [
            ("email", ErrorCode.CUSTOM_CHECK_FAILED, "Email already registered")
        ]

    async def test_body_id_does_not_unlock_taken_email(self, session, stored_client):
        report, _ = await validate(
            CLIENT_CREATE_SCHEMA,
            session,
            body={**VALID_BODY, "id": stored_client.id, "email": stored_client.email},
        )

        assert [(e.field, e.code) for e in report.errors] == [
            ("email", ErrorCode.CUSTOM_CHECK_FAILED)
        ]

    async def test_name_longer_than_column_fails(self, session):
        report, _ = await validate(
            CLIENT_CREATE_SCHEMA, session, body={**VALID_BODY, "name": "a" * 256}
        )

        assert [(e.field, e.message) for e in report.errors] == [("name", "Invalid name")]

    async def test_invalid_status_type(self, session):
        report, _ = await validate(
            CLIENT_CREATE_SCHEMA, session, body={**VALID_BODY, "status": "yes"}
        )

        assert [e.field for e in report.errors] == ["status"]

    async def test_every_invalid_field_reported(self, session):
        report, _ = await validate(
            CLIENT_CREATE_SCHEMA,
            session,
            body={"name": "ab", "email": "not-an-email", "phone": "123", "status": 1},
        )

        assert [(e.field, e.message) for e in report.errors] == [
            ("name", "Invalid name"),
            ("email", "Invalid email"),
            ("phone", "Invalid phone"),
            ("status", "Invalid status"),
        ]
        assert report.status_code == 422


@pytest.mark.integration
class TestIdentifierSchemas:
    """Test CLIENT_ID_SCHEMA and CLIENT_UPDATE_SCHEMA."""

    async def test_known_id_attaches_client(self, session, stored_client):
        report, ctx = await validate(CLIENT_ID_SCHEMA, session, path={"id": str(stored_client.id)})

        assert report.is_valid
        assert ctx.scratch["client"].email == "bea@example.com"

    @pytest.mark.parametrize("raw_id", ["999", "abc", "0", "-1", "99999999999999999999"])
    async def test_unresolvable_id_is_404(self, session, stored_client, raw_id):
        report, ctx = await validate(CLIENT_ID_SCHEMA, session, path={"id": raw_id})

        assert report.status_code == 404
        assert report.errors[0].code == ErrorCode.CLIENT_NOT_FOUND
        assert report.errors[0].message == "Client not found"
        assert "client" not in ctx.scratch

    async def test_update_reads_id_from_body(self, session, stored_client):
        report, ctx = await validate(
            CLIENT_UPDATE_SCHEMA,
            session,
            body={"id": stored_client.id, **VALID_BODY},
        )

        assert report.is_valid
        assert ctx.scratch["client"].id == stored_client.id

    async def test_update_may_keep_own_email(self, session, stored_client):
        report, _ = await validate(
            CLIENT_UPDATE_SCHEMA,
            session,
            body={"id": str(stored_client.id), **VALID_BODY, "email": stored_client.email},
        )

        assert report.is_valid

    async def test_update_cannot_take_another_clients_email(self, session, stored_client):
        other = await ClientRepository(session=session).insert(
            {"name": "Cid", "email": "cid@example.com", "phone": "(11) 3333-4444", "status": True}
        )

        report, _ = await validate(
            CLIENT_UPDATE_SCHEMA,
            session,
            body={"id": other.value.id, **VALID_BODY, "email": stored_client.email},
        )

        assert [e.field for e in report.errors] == ["email"]
        assert report.status_code == 422

    async def test_update_unknown_id_with_invalid_fields_is_404(self, session):
        report, _ = await validate(
            CLIENT_UPDATE_SCHEMA, session, body={"id": 999, "name": "x"}
        )

        assert report.errors[0].field == "id"
        assert len(report.errors) > 1
        assert report.status_code == 404


@pytest.mark.integration
class TestListSchema:
    """Test CLIENT_LIST_SCHEMA."""

    async def test_filters_are_sanitized(self, session):
        report, _ = await validate(
            CLIENT_LIST_SCHEMA, session, query={"status": "false", "name": "Ana"}
        )

        assert report.is_valid
        assert report.data["status"] is False
        assert report.data["name"] == "Ana"

    async def test_order_by_must_be_sortable(self, session):
        report, _ = await validate(CLIENT_LIST_SCHEMA, session, query={"orderBy": "secret"})

        assert [(e.field, e.code) for e in report.errors] == [
            ("orderBy", ErrorCode.INVALID_PAGINATION)
        ]

    async def test_body_filters_are_ignored(self, session):
        report, _ = await validate(CLIENT_LIST_SCHEMA, session, body={"status": "maybe"})

        assert report.is_valid
        assert "status" not in report.data
