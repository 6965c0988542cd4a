"""Tests for input validation."""

import pytest

from salesrank.errors import InvalidInput
from salesrank.intelligence.validator import (
    CATEGORY_REQUIRED,
    PRICE_INVALID,
    RANK_INVALID,
    RANK_TOO_HIGH,
    parse_price,
    parse_rank,
    validate_input,
)


class TestParsing:
    """Tests for raw value parsing."""

    def test_parse_rank_with_separators(self):
        assert parse_rank("12,345") == 12345
        assert parse_rank(" 1,000 ") == 1000

    def test_parse_rank_numbers(self):
        assert parse_rank(500) == 500
        assert parse_rank(2.5) == 2.5

    def test_parse_rank_garbage(self):
        assert parse_rank("") is None
        assert parse_rank("abc") is None
        assert parse_rank(None) is None
        assert parse_rank(True) is None
        assert parse_rank(float("nan")) is None

    def test_parse_price(self):
        assert parse_price("29.99") == 29.99
        assert parse_price("$19.50") == 19.5
        assert parse_price(12) == 12.0
        assert parse_price("free") is None

    def test_parse_price_rejects_commas(self):
        """Test that only ranks take thousands separators."""
        assert parse_price("1,5") is None
        assert parse_price("1,299.00") is None

    def test_parse_huge_integers(self):
        assert parse_rank(10**400) == float("inf")
        assert parse_price(10**400) == float("inf")
        assert parse_rank(-(10**400)) == float("-inf")


class TestValidateInput:
    """Tests for validate_input."""

    def test_valid_input(self):
        request = validate_input("Electronics", "1,500", "29.99")

        assert request.category == "Electronics"
        assert request.rank == 1500
        assert request.price == 29.99
        assert request.price_provided is True

    def test_price_optional(self):
        request = validate_input("Electronics", 1500)

        assert request.price is None
        assert request.price_provided is False

    def test_empty_price_string_is_absent(self):
        request = validate_input("Electronics", 1500, "  ")

        assert request.price is None

    def test_missing_category(self):
        for category in (None, "", "   "):
            with pytest.raises(InvalidInput) as exc_info:
                validate_input(category, 1500)
            assert exc_info.value.message == CATEGORY_REQUIRED
            assert exc_info.value.field == "category"

    def test_rank_zero_rejected(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_input("Electronics", 0)

        assert exc_info.value.message == RANK_INVALID
        assert exc_info.value.field == "rank"

    def test_rank_not_a_number(self):
        for rank in ("abc", "", None, -5, 1.5):
            with pytest.raises(InvalidInput) as exc_info:
                validate_input("Electronics", rank)
            assert exc_info.value.message == RANK_INVALID

    def test_rank_ceiling(self):
        validate_input("Electronics", 10_000_000)

        with pytest.raises(InvalidInput) as exc_info:
            validate_input("Electronics", 10_000_001)

        assert exc_info.value.message == RANK_TOO_HIGH

    def test_custom_rank_ceiling(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_input("Electronics", 5001, max_rank=5000)

        assert exc_info.value.message == RANK_TOO_HIGH

    def test_invalid_price(self):
        for price in (0, -1, "abc", "0.00"):
            with pytest.raises(InvalidInput) as exc_info:
                validate_input("Electronics", 1500, price)
            assert exc_info.value.message == PRICE_INVALID
            assert exc_info.value.field == "price"

    def test_first_failure_wins(self):
        """Test that only the first failing rule is reported."""
        with pytest.raises(InvalidInput) as exc_info:
            validate_input("", 0, -1)
        assert exc_info.value.message == CATEGORY_REQUIRED

        with pytest.raises(InvalidInput) as exc_info:
            validate_input("Electronics", 0, -1)
        assert exc_info.value.message == RANK_INVALID

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            validate_input("Electronics", 0)

    def test_huge_rank_is_too_high(self):
        """Test that ranks too large for a float hit the ceiling rule."""
        for rank in (10**400, "inf", "1" * 400):
            with pytest.raises(InvalidInput) as exc_info:
                validate_input("Electronics", rank)
            assert exc_info.value.message == RANK_TOO_HIGH

    def test_huge_price_rejected(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_input("Electronics", 100, 10**400)

        assert exc_info.value.message == PRICE_INVALID

    def test_comma_price_rejected(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_input("Electronics", "1,500", "1,5")

        assert exc_info.value.message == PRICE_INVALID
