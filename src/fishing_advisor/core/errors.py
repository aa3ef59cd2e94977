"""Error types raised by the weather, geocoding and geolocation clients."""


class FishingAdvisorError(Exception):
    """Base class for all recoverable advisor errors.

    Attributes:
        user_message: Short message suitable for showing to the user
    """

    user_message = "Something went wrong while fetching weather data."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)
        if message:
            self.user_message = message


class PlaceNotFound(FishingAdvisorError):
    """The provider has no match for the requested place."""

    user_message = "City not found. Check the spelling or try another name."


class NetworkFailure(FishingAdvisorError):
    """Transport-level failure talking to a remote service."""

    user_message = "Network error. Check your connection and try again."


class RateLimited(FishingAdvisorError):
    """The provider is throttling requests."""

    user_message = "Too many requests. Wait a moment and try again."


class WeatherApiError(FishingAdvisorError):
    """Unexpected or malformed response from the weather provider."""

    user_message = "The weather service returned an unexpected response."


class WeatherApiNotConfigured(WeatherApiError):
    """No weather API key is configured."""

    user_message = (
        "No weather API key configured. "
        "Set OPENWEATHER_API_KEY to enable weather lookups."
    )


class GeolocationError(FishingAdvisorError):
    """Base class for position lookup failures."""

    user_message = "Could not determine your location."


class GeolocationDenied(GeolocationError):
    user_message = "Location lookup was refused."


class GeolocationUnavailable(GeolocationError):
    user_message = "Location service is unavailable."


class GeolocationTimeout(GeolocationError):
    user_message = "Location lookup timed out."
