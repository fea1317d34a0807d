"""Unit tests for domain validation functions and PaginationParams."""

import pytest

from crud_backbone.domain.validators import (
    first_upper_case,
    is_valid_email,
    is_valid_phone,
)
from crud_backbone.domain.value_objects.pagination import PaginationParams, SortOrder


@pytest.mark.unit
class TestEmailValidation:
    """Test is_valid_email."""

    @pytest.mark.parametrize(
        "email",
        ["ana@example.com", "ana.maria+tag@sub.example.com.br"],
    )
    def test_valid(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize("email", ["invalid", "ana@", "@example.com", "", None, 42])
    def test_invalid(self, email):
        assert is_valid_email(email) is False


@pytest.mark.unit
class TestPhoneValidation:
    """Test is_valid_phone."""

    @pytest.mark.parametrize("phone", ["(34) 99999-9999", "(11) 3333-4444", "(21) 91234-5678"])
    def test_valid(self, phone):
        assert is_valid_phone(phone) is True

    @pytest.mark.parametrize(
        "phone",
        [
            "34 99999-9999",
            "(34)99999-9999",
            "(04) 99999-9999",
            "(34) 1999-9999",
            "(34) 90999-9999",
            "(34) 99999-99999",
            "",
            None,
        ],
    )
    def test_invalid(self, phone):
        assert is_valid_phone(phone) is False


@pytest.mark.unit
class TestFirstUpperCase:
    """Test first_upper_case sanitizer."""

    def test_capitalises_first_letter_only(self):
        assert first_upper_case("ana maria") == "Ana maria"

    def test_keeps_rest_untouched(self):
        assert first_upper_case("aNA") == "ANA"

    def test_empty_string(self):
        assert first_upper_case("") == ""

    def test_non_string_becomes_none(self):
        assert first_upper_case(12) is None


@pytest.mark.unit
class TestPaginationParams:
    """Test PaginationParams value object."""

    def test_defaults(self):
        params = PaginationParams()

        assert params.page == 0
        assert params.size == 10
        assert params.order == SortOrder.ASC
        assert params.order_by == "id"
        assert dict(params.filters) == {}

    def test_offset(self):
        assert PaginationParams(page=3, size=25).offset == 75

    def test_rejects_negative_page(self):
        with pytest.raises(ValueError, match="page"):
            PaginationParams(page=-1)

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError, match="size"):
            PaginationParams(size=0)

    def test_filters_are_frozen_copy(self):
        source = {"status": True}
        params = PaginationParams(filters=source)
        source["name"] = "Ana"

        assert dict(params.filters) == {"status": True}
        with pytest.raises(TypeError):
            params.filters["name"] = "Ana"  # type: ignore[index]

    def test_is_immutable(self):
        params = PaginationParams()

        with pytest.raises(AttributeError):
            params.page = 1  # type: ignore[misc]
