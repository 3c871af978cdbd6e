# file: aqi_cli/utils.py

from typing import Dict, List
from aqi_cli.models import AqiInfo, Station

AQI_SCALE_MAX = 500
NEUTRAL_COLOR = "white"

CATEGORY_COLORS: Dict[str, str] = {
    "Good" : "green",
    "Moderate" : "yellow",
    "Unhealthy for Sensitive Groups" : "red",
    "Unhealthy" : "red",
    "Very Unhealthy" : "red",
    "Hazardous" : "red",
}


def gauge_percent(aqi: float) -> int :
    """Share of the 0-500 AQI scale, truncated to an integer percent."""
    return int((aqi / AQI_SCALE_MAX) * 100)


def bar_color(category: str) -> str :
    """Gauge color for an AQI category; unknown categories get the neutral color."""
    return CATEGORY_COLORS.get(category, NEUTRAL_COLOR)


def gauge_title(aqi: float) -> str :
    return f"Air Quality Index = {int(aqi)}"


def pollutant_rows(info: AqiInfo) -> List[str] :
    return [
        f"Pollutant: {info.pollutant}",
        f"Concentration: {int(info.concentration)}",
        f"Category: {info.category}",
    ]


def location_rows(station: Station) -> List[str] :
    return [
        f"City: {station.city}",
        f"State: {station.state}",
        f"Place: {station.place_name}",
        f"Updated At: {station.updated_at}",
    ]
