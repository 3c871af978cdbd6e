"""Tests for turning location flags into a request url."""

import pytest

from aqi_cli.config import AQI_API_URL
from aqi_cli.errors import UsageError
from aqi_cli.query import ByCity, ByCoordinates, ByPostalCountry, USAGE_MESSAGE, build_url, location_from_flags

BASE = "http://localhost:3000/api"


class TestLocationFromFlags:

    def test_city_alone(self):
        assert location_from_flags(city="Lahore") == ByCity(city="Lahore")

    def test_postal_and_country(self):
        assert location_from_flags(postal="54000", country="PK") == ByPostalCountry(postal="54000", country="PK")

    def test_coordinates(self):
        assert location_from_flags(latitude="31.5", longitude="74.3") == ByCoordinates(latitude="31.5",
                                                                                        longitude="74.3")

    def test_empty_strings_count_as_missing(self):
        assert location_from_flags(city="Lahore", postal="", country="", latitude="", longitude="") == \
            ByCity(city="Lahore")

    @pytest.mark.parametrize("flags", [
        {},
        {"country": "PK"},
        {"postal": "54000"},
        {"latitude": "31.5"},
        {"longitude": "74.3"},
        {"city": "Lahore", "country": "PK"},
        {"city": "Lahore", "postal": "54000", "country": "PK"},
        {"postal": "54000", "country": "PK", "latitude": "31.5", "longitude": "74.3"},
        {"city": "Lahore", "latitude": "31.5", "longitude": "74.3"},
        {"postal": "54000", "latitude": "31.5"},
    ])
    def test_other_combinations_are_rejected(self, flags):
        with pytest.raises(UsageError) as excinfo:
            location_from_flags(**flags)
        assert str(excinfo.value) == USAGE_MESSAGE


class TestBuildUrl:

    def test_city(self):
        assert build_url(ByCity(city="Lahore"), BASE) == "http://localhost:3000/api?city=Lahore"

    def test_postal_country(self):
        url = build_url(ByPostalCountry(postal="54000", country="PK"), BASE)
        assert url == "http://localhost:3000/api?postal=54000&country=PK"

    def test_coordinates(self):
        url = build_url(ByCoordinates(latitude="31.5", longitude="74.3"), BASE)
        assert url == "http://localhost:3000/api?lat=31.5&lng=74.3"

    def test_negative_coordinates_are_kept(self):
        url = build_url(ByCoordinates(latitude="-33.86", longitude="151.2"), BASE)
        assert url == "http://localhost:3000/api?lat=-33.86&lng=151.2"

    def test_values_are_percent_encoded(self):
        url = build_url(ByCity(city="New York&x=1"), BASE)
        assert url == "http://localhost:3000/api?city=New%20York%26x%3D1"

    def test_default_base_url(self):
        assert build_url(ByCity(city="Lahore")) == f"{AQI_API_URL}?city=Lahore"
