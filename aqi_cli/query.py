# file: aqi_cli/query.py

from urllib.parse import quote
from pydantic import BaseModel, ConfigDict
from typing import Dict, Optional, Union

from aqi_cli.config import AQI_API_URL
from aqi_cli.errors import UsageError

USAGE_MESSAGE = ("please specify the location by using any of the following flags: "
                 "--city, --postal, --country, --latitude, --longitude")


class ByCity(BaseModel) :
    model_config = ConfigDict(frozen = True)
    city: str

    def params(self) -> Dict[str, str] :
        return {"city" : self.city}


class ByPostalCountry(BaseModel) :
    model_config = ConfigDict(frozen = True)
    postal: str
    country: str

    def params(self) -> Dict[str, str] :
        return {"postal" : self.postal, "country" : self.country}


class ByCoordinates(BaseModel) :
    model_config = ConfigDict(frozen = True)
    latitude: str
    longitude: str

    def params(self) -> Dict[str, str] :
        return {"lat" : self.latitude, "lng" : self.longitude}


LocationQuery = Union[ByCity, ByPostalCountry, ByCoordinates]


def location_from_flags(city: Optional[str] = None, postal: Optional[str] = None, country: Optional[str] = None,
                        latitude: Optional[str] = None, longitude: Optional[str] = None) -> LocationQuery :
    """Turn the five location flags into exactly one location shape.

    Empty strings count as missing. City alone, postal with country, or latitude
    with longitude are accepted; any other mix raises UsageError.
    """
    given = {name for name, value in (("city", city), ("postal", postal), ("country", country),
                                       ("latitude", latitude), ("longitude", longitude)) if value}

    if given == {"city"} :
        return ByCity(city = city)
    if given == {"postal", "country"} :
        return ByPostalCountry(postal = postal, country = country)
    if given == {"latitude", "longitude"} :
        return ByCoordinates(latitude = latitude, longitude = longitude)
    raise UsageError(USAGE_MESSAGE)


def build_url(location: LocationQuery, base_url: str = AQI_API_URL) -> str :
    """Build the GET url for a location, percent-encoding every value."""
    params = "&".join(f"{key}={quote(value, safe = '')}" for key, value in location.params().items())
    return f"{base_url}?{params}"
