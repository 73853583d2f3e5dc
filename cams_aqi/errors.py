# file: cams_aqi/errors.py


class AirQualityError(Exception):
    """Base class for errors reported to the client as HTTP 400."""

    status_code = 400


class InputValidationError(AirQualityError, ValueError):
    pass


class UpstreamFetchError(AirQualityError):
    def __init__(self, message: str = "Could not fetch data"):
        super().__init__(message)


class LayerConfigurationError(AirQualityError, KeyError):
    def __str__(self) -> str:
        # KeyError quotes its argument
        return str(self.args[0]) if self.args else ""
