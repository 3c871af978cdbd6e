#file: aqi_cli/models.py

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, model_validator
from typing import Any, List


class WireModel(BaseModel) :
    """Read-only record decoded from the service; null fields fall back to their defaults."""
    model_config = ConfigDict(frozen = True, populate_by_name = True)

    @model_validator(mode = "before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any :
        if isinstance(data, dict) :
            return {key : value for key, value in data.items() if value is not None}
        return data


class AqiInfo(WireModel) :
    pollutant: StrictStr = Field("", description = "Dominant pollutant")
    concentration: StrictFloat = Field(0.0, description = "Concentration of the dominant pollutant")
    category: StrictStr = Field("", description = "AQI category, e.g. Good or Hazardous")


class Station(WireModel) :
    co: StrictFloat = Field(0.0, alias = "CO", description = "CO concentration")
    no2: StrictFloat = Field(0.0, alias = "NO2", description = "NO2 concentration")
    ozone: StrictFloat = Field(0.0, alias = "OZONE", description = "Ozone concentration")
    pm10: StrictFloat = Field(0.0, alias = "PM10", description = "PM10 concentration")
    pm25: StrictFloat = Field(0.0, alias = "PM25", description = "PM2.5 concentration")
    country_code: StrictStr = Field("", alias = "countryCode")
    division: StrictStr = Field("")
    lat: StrictFloat = Field(0.0, description = "Latitude of the station")
    lng: StrictFloat = Field(0.0, description = "Longitude of the station")
    postal_code: StrictStr = Field("", alias = "postalCode")
    city: StrictStr = Field("")
    place_name: StrictStr = Field("", alias = "placeName")
    state: StrictStr = Field("")
    updated_at: StrictStr = Field("", alias = "updatedAt", description = "Timestamp of the reading")
    aqi: StrictFloat = Field(0.0, alias = "AQI", description = "Overall Air Quality Index")
    aqi_info: AqiInfo = Field(default_factory = AqiInfo, alias = "AqiInfo")


class ApiResponse(WireModel) :
    message: StrictStr = Field("")
    stations: List[Station] = Field(default_factory = list)


class StationSummary(WireModel) :
    """Reduced station record written to the log before the station is displayed."""
    city: str
    place_name: str = Field(alias = "placeName")
    state: str
    updated_at: str = Field(alias = "updatedAt")
    aqi: float = Field(alias = "AQI")
    aqi_info: AqiInfo = Field(alias = "AqiInfo")

    @classmethod
    def from_station(cls, station: Station) -> "StationSummary" :
        return cls(city = station.city, place_name = station.place_name, state = station.state,
                   updated_at = station.updated_at, aqi = station.aqi, aqi_info = station.aqi_info)

    def to_json(self) -> str :
        return self.model_dump_json(by_alias = True)
