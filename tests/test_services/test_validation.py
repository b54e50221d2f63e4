"""Tests for city input validation."""

import pytest

from cityweather.exceptions import InputValidationError
from cityweather.services.validation import (
    EMPTY_CITY_MESSAGE,
    INVALID_CITY_MESSAGE,
    validate_city,
)


class TestValidateCity:
    """Tests for validate_city."""

    @pytest.mark.parametrize("city", ["New York", "Paris", "Stratford-upon-Avon"])
    def test_valid_names(self, city):
        assert validate_city(city) == city

    def test_strips_whitespace(self):
        assert validate_city("  Paris  ") == "Paris"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_input(self, raw):
        with pytest.raises(InputValidationError) as exc_info:
            validate_city(raw)
        assert exc_info.value.message == EMPTY_CITY_MESSAGE

    @pytest.mark.parametrize("raw", ["New York3", "Paris!", "São Paulo", "Rome,IT"])
    def test_invalid_characters(self, raw):
        with pytest.raises(InputValidationError) as exc_info:
            validate_city(raw)
        assert str(exc_info.value) == INVALID_CITY_MESSAGE
