"""Pydantic models for the Google Geocoding JSON envelope.

Only the fields that are consumed are declared; everything else the API
returns (address_components, viewport, types, ...) is ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from city_distance.domain.models import Coordinate, ResolvedLocation


class GeoLocation(BaseModel):
    """Latitude/longitude pair as returned by the API."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Geometry(BaseModel):
    """Geometry of a geocoding result."""

    model_config = ConfigDict(frozen=True)

    location: GeoLocation


class GeocodeResult(BaseModel):
    """A single geocoding candidate."""

    model_config = ConfigDict(frozen=True)

    formatted_address: str
    geometry: Geometry

    def to_resolved_location(self) -> ResolvedLocation:
        """Convert to the domain model."""
        return ResolvedLocation(
            coordinate=Coordinate(
                latitude=self.geometry.location.lat,
                longitude=self.geometry.location.lng,
            ),
            formatted_address=self.formatted_address,
        )


class GeocodeResponse(BaseModel):
    """Top-level geocoding response envelope."""

    model_config = ConfigDict(frozen=True)

    status: str
    # Candidates stay raw; only the first one is validated when consumed.
    results: list[Any] | None = None
    error_message: str | None = None
