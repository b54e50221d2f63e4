"""Tests for formatting helpers."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from cityweather.services.formatting import (
    capitalize_first,
    format_city_name,
    format_date,
    format_day_name,
    format_temperature,
    format_time,
    format_wind,
    round_half_up,
)

TS = datetime(2024, 1, 15, 14, 30, tzinfo=UTC)


class TestNumbers:
    """Tests for numeric formatting."""

    @pytest.mark.parametrize(
        "value,expected", [(2.5, 3), (2.4, 2), (-2.5, -2), (-2.6, -3), (0.0, 0)]
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_format_temperature(self):
        assert format_temperature(7.6) == "8°C"
        assert format_temperature(-0.4) == "0°C"

    def test_format_wind_converts_to_kmh(self):
        assert format_wind(4.1) == "15 km/h"
        assert format_wind(0) == "0 km/h"


class TestText:
    """Tests for text helpers."""

    def test_format_city_name(self):
        assert format_city_name("new YORK") == "New York"
        assert format_city_name("rio de janeiro") == "Rio De Janeiro"

    def test_format_city_name_keeps_hyphenated_word(self):
        assert format_city_name("stratford-UPON-avon") == "Stratford-upon-avon"

    def test_capitalize_first(self):
        assert capitalize_first("light rain") == "Light rain"
        assert capitalize_first("") == ""


class TestTimestamps:
    """Tests for timestamp formatting in an explicit zone."""

    def test_format_date(self):
        assert format_date(TS, tz=UTC) == "Monday, January 15, 2024"

    def test_format_date_with_time(self):
        assert format_date(TS, show_time=True, tz=UTC) == "Monday, January 15, 2024, 02:30 PM"

    def test_format_time(self):
        assert format_time(TS, tz=UTC) == "02:30 PM"

    def test_format_day_name(self):
        assert format_day_name(TS, tz=UTC) == "Mon"

    def test_observer_zone_changes_day(self):
        """Test that conversion to the observer zone happens before formatting."""
        tokyo = timezone(timedelta(hours=9))
        assert format_day_name(datetime(2024, 1, 15, 20, tzinfo=UTC), tz=tokyo) == "Tue"
