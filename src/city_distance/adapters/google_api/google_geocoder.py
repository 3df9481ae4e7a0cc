"""Google geocoder adapter."""

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from city_distance.adapters.google_api.constants import (
    GOOGLE_GEOCODING_URL,
    STATUS_OK,
    STATUS_ZERO_RESULTS,
)
from city_distance.adapters.google_api.http_client import GoogleHttpClient
from city_distance.adapters.google_api.response_models import GeocodeResult
from city_distance.domain.errors import DecodeError
from city_distance.domain.models import Found, LookupOutcome, NotFound
from city_distance.domain.ports.geocoder import Geocoder

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class GoogleGeocoder(Geocoder):
    """Adapter resolving place names through the Google Geocoding API."""

    def __init__(
        self,
        session: "ClientSession",
        api_key: str | None = None,
        base_url: str = GOOGLE_GEOCODING_URL,
    ) -> None:
        """Initialize with an aiohttp session and optional API key."""
        self._client = GoogleHttpClient(session, api_key=api_key, base_url=base_url)

    async def resolve(self, query: str) -> LookupOutcome:
        """Resolve a place name, trusting the provider's first candidate."""
        if not query or not query.strip():
            raise ValueError("query must be a non-empty string")

        envelope = await self._client.fetch_geocode(query)

        if not envelope.results:
            if envelope.status not in (STATUS_OK, STATUS_ZERO_RESULTS):
                logger.warning(
                    f"Geocoding API answered '{envelope.status}' for '{query}'"
                    + (f": {envelope.error_message}" if envelope.error_message else "")
                )
            return NotFound(query=query, status=envelope.status)

        try:
            first = GeocodeResult.model_validate(envelope.results[0])
        except ValidationError as e:
            logger.warning(f"Could not decode first geocoding result for '{query}': {e}")
            raise DecodeError(query, f"malformed result: {e.errors()[0]['msg']}") from e

        location = first.to_resolved_location()
        logger.info(f"Resolved '{query}' to {location.formatted_address}")
        return Found(query=query, location=location)
