"""Error taxonomy for city distance lookups."""


class CityDistanceError(Exception):
    """Base class for all errors raised by this package."""


class InvalidUsageError(CityDistanceError, ValueError):
    """Caller supplied an invalid unit or argument list."""


class LocationNotFoundError(CityDistanceError):
    """The geocoding provider returned no candidates for a query."""

    def __init__(self, query: str, status: str = "ZERO_RESULTS") -> None:
        self.query = query
        self.status = status
        super().__init__(f"No location found for '{query}' (status: {status})")


class GeocodingError(CityDistanceError):
    """A lookup failed before a usable answer was obtained."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"Geocoding '{query}' failed: {reason}")


class TransportError(GeocodingError):
    """The provider could not be reached, or answered with a non-200 status."""

    def __init__(self, query: str, reason: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(query, reason)


class DecodeError(GeocodingError):
    """The provider's response body could not be parsed into the expected shape."""


class LookupTimeoutError(GeocodingError):
    """A lookup did not report back before the deadline."""

    def __init__(self, query: str, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(query, f"no answer within {timeout_seconds} seconds")
