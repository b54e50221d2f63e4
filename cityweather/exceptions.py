"""Error types raised while looking up weather."""


class WeatherError(Exception):
    """Base class for all lookup errors that end up in front of the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InputValidationError(WeatherError):
    """The city name typed by the user is not acceptable."""


class UpstreamError(WeatherError):
    """The weather provider answered with an error or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(WeatherError):
    """The provider answered successfully but the payload is unusable."""


class ConfigError(WeatherError):
    """Configuration is missing or invalid."""
