"""Pytest fixtures and configuration."""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def station_payload():
    """One station as the service returns it."""
    return {
        "CO": 0.4, "NO2": 12.5, "OZONE": 31.0, "PM10": 88.0, "PM25": 160.2,
        "countryCode": "PK", "division": "Punjab", "lat": 31.5, "lng": 74.3,
        "postalCode": "54000", "city": "Lahore", "placeName": "Gulberg",
        "state": "Punjab", "updatedAt": "2024-11-02T10:00:00Z", "AQI": 250,
        "AqiInfo": {"pollutant": "PM2.5", "concentration": 160.2, "category": "Very Unhealthy"},
    }


@pytest.fixture
def envelope(station_payload):
    second = dict(station_payload, city="Karachi", placeName="Clifton", AQI=80,
                  AqiInfo={"pollutant": "PM10", "concentration": 55.0, "category": "Moderate"})
    return {"message": "success", "stations": [station_payload, second]}


class FakeScreen:
    """Stand-in for a curses window that records writes and replays keys."""

    def __init__(self, height=24, width=120, keys=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.writes = []
        self.erased = 0
        self.refreshed = 0

    def getmaxyx(self):
        return self.height, self.width

    def addnstr(self, y, x, text, n, attr=0):
        self.writes.append((y, x, text[:n], attr))

    def erase(self):
        self.erased += 1

    def refresh(self):
        self.refreshed += 1

    def keypad(self, flag):
        self.keypad_flag = flag

    def getch(self):
        return self.keys.pop(0)

    def text(self):
        return "\n".join(text for _, _, text, _ in self.writes)


@pytest.fixture
def fake_screen():
    return FakeScreen()


@pytest.fixture
def make_screen():
    return FakeScreen
