"""HTTP client for Google Geocoding API requests.

API Documentation: https://developers.google.com/maps/documentation/geocoding
"""

import logging
from typing import TYPE_CHECKING

import aiohttp
from pydantic import ValidationError

from city_distance.adapters.api_request_logger import log_api_request
from city_distance.adapters.google_api.constants import (
    DEFAULT_HEADERS,
    ERROR_BODY_EXCERPT,
    GOOGLE_GEOCODING_URL,
)
from city_distance.adapters.google_api.response_models import GeocodeResponse
from city_distance.domain.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class GoogleHttpClient:
    """HTTP client for the Google Geocoding API."""

    def __init__(
        self,
        session: "ClientSession",
        api_key: str | None = None,
        base_url: str = GOOGLE_GEOCODING_URL,
    ) -> None:
        """Initialize with an aiohttp session and optional API key.

        Args:
            session: Shared aiohttp session used for all requests.
            api_key: Google API key. Requests are unauthenticated when empty.
            base_url: Geocoding endpoint URL.
        """
        self._session = session
        self._api_key = api_key
        self._base_url = base_url

    def _build_params(self, query: str) -> dict[str, str]:
        """Build query parameters; aiohttp URL-escapes the values."""
        params = {"sensor": "false", "address": query}
        if self._api_key:
            params["key"] = self._api_key
        return params

    async def _read_body(self, response: "ClientResponse", query: str) -> str:
        """Read the response body, rejecting non-200 answers."""
        if response.status != 200:
            error_text = await response.text(errors="replace")
            error_body = error_text[:ERROR_BODY_EXCERPT] if error_text else "(empty response body)"
            content_type = response.headers.get("Content-Type", "unknown")
            logger.error(
                f"Geocoding API returned status {response.status} for '{query}': "
                f"{error_body} (Content-Type: {content_type})"
            )
            raise TransportError(
                query, f"HTTP status {response.status}", status_code=response.status
            )

        try:
            return await response.text()
        except UnicodeDecodeError as e:
            raise DecodeError(query, f"response body is not valid text: {e}") from e

    @staticmethod
    def _parse_envelope(body: str, query: str) -> GeocodeResponse:
        """Parse the JSON envelope into its typed model."""
        try:
            return GeocodeResponse.model_validate_json(body)
        except ValidationError as e:
            logger.warning(f"Could not decode geocoding response for '{query}': {e}")
            raise DecodeError(query, f"malformed response: {e.errors()[0]['msg']}") from e

    async def fetch_geocode(self, query: str) -> GeocodeResponse:
        """Fetch the geocoding envelope for a free-text query.

        Args:
            query: Place name to look up.

        Returns:
            Parsed response envelope.

        Raises:
            TransportError: On connection failures, client timeouts or non-200 status.
            DecodeError: When the body is not a valid geocoding envelope.
        """
        params = self._build_params(query)
        log_api_request("GET", self._base_url, params=params, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                self._base_url, params=params, headers=DEFAULT_HEADERS
            ) as response:
                body = await self._read_body(response, query)
        except aiohttp.ClientError as e:
            logger.warning(f"Error reaching geocoding API for '{query}': {e}")
            raise TransportError(query, str(e) or type(e).__name__) from e
        except TimeoutError as e:
            logger.warning(f"Geocoding request for '{query}' timed out")
            raise TransportError(query, "request timed out") from e

        return self._parse_envelope(body, query)
