#file: aqi_cli/aqi_api.py

import logging
import requests
from pydantic import ValidationError
from typing import Optional

from aqi_cli.config import get_request_timeout
from aqi_cli.errors import DecodeError, NoStationsError, TransportError
from aqi_cli.models import ApiResponse

HEADERS = {"Content-Type" : "application/json"}


def fetch_air_quality(url: str, timeout: Optional[float] = None) -> ApiResponse :
    """Fetch and decode the station readings for one location url.

    Every failure is raised as an AqiError subclass; an empty station list is a failure too.
    """
    if timeout is None :
        timeout = get_request_timeout()
    logging.debug(f"Fetching air quality from {url}")
    try :
        with requests.get(url, headers = HEADERS, timeout = timeout) as response :
            response.raise_for_status()
            payload = response.json()
    except requests.exceptions.JSONDecodeError as e :
        raise DecodeError(f"unable to decode the response: {e}") from e
    except requests.RequestException as e :
        raise TransportError(f"request to {url} failed: {e}") from e

    try :
        aqi = ApiResponse.model_validate(payload)
    except ValidationError as e :
        raise DecodeError(f"unexpected response shape: {e}") from e

    if not aqi.stations :
        raise NoStationsError("no stations found")
    logging.debug(f"Received {len(aqi.stations)} stations, message: {aqi.message}")
    return aqi
