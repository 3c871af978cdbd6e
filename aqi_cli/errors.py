# file: aqi_cli/errors.py


class AqiError(Exception) :
    """Base class for every failure that stops the command."""


class UsageError(AqiError) :
    """Location flags do not form a valid location."""


class TransportError(AqiError) :
    """The request could not be sent or the service answered with an error status."""


class DecodeError(AqiError) :
    """The response body is not the expected JSON envelope."""


class NoStationsError(AqiError) :
    """The service returned no stations for the location."""


class TerminalError(AqiError) :
    """The terminal could not be prepared for drawing."""


class ConfigError(AqiError) :
    """An environment setting holds a value the command cannot use."""
