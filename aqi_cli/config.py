# file: aqi_cli/config.py

import logging
import os
from typing import Optional
from dotenv import load_dotenv

from aqi_cli.errors import ConfigError

load_dotenv()

AQI_API_URL = os.getenv("AQI_API_URL", "http://localhost:3000/api")


def get_log_level() -> int :
    """Read AQI_LOG_LEVEL as a logging level number, INFO when unset."""
    value = os.getenv("AQI_LOG_LEVEL") or "INFO"
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int) :
        raise ConfigError(f"AQI_LOG_LEVEL must be a logging level name, got {value!r}")
    return level


def get_request_timeout() -> Optional[float] :
    """Read the HTTP timeout in seconds; unset means wait as long as the client does."""
    value = os.getenv("AQI_REQUEST_TIMEOUT")
    if not value :
        return None
    try :
        timeout = float(value)
    except ValueError as e :
        raise ConfigError(f"AQI_REQUEST_TIMEOUT must be a number of seconds, got {value!r}") from e
    if timeout <= 0 :
        raise ConfigError(f"AQI_REQUEST_TIMEOUT must be positive, got {value!r}")
    return timeout
