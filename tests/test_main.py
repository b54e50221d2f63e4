"""Tests for command line helpers."""

import pytest

from cityweather.__main__ import build_location, build_parser
from cityweather.models.config import Config


class TestBuildParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert str(args.config) == "config.json"
        assert args.city is None
        assert args.link is None
        assert args.verbose is False

    def test_city_and_link(self):
        args = build_parser().parse_args(["--city", "Paris", "--link", "cityweather://search"])
        assert args.city == "Paris"
        assert args.link == "cityweather://search"


class TestBuildLocation:
    """Tests for the startup location."""

    @pytest.fixture
    def config(self):
        return Config()

    def test_base_url_from_settings(self, config):
        location = build_location(config, link=None, city=None)
        assert location.current_url == "cityweather://search"
        assert location.initial_city is None

    def test_city_argument(self, config):
        assert build_location(config, link=None, city="New York").initial_city == "New York"

    def test_link_argument(self, config):
        location = build_location(config, link="https://weather.example.com/?city=Oslo", city=None)
        assert location.initial_city == "Oslo"

    def test_city_overrides_link(self, config):
        location = build_location(config, link="cityweather://search?city=Oslo", city="Rome")
        assert location.initial_city == "Rome"
