"""Domain layer - core models, distance computation and ports."""

from city_distance.domain.models import (
    Coordinate,
    DistanceResult,
    DistanceUnit,
    Found,
    NotFound,
    ResolvedLocation,
)
from city_distance.domain.ports import Geocoder

__all__ = [
    "Coordinate",
    "DistanceResult",
    "DistanceUnit",
    "Found",
    "Geocoder",
    "NotFound",
    "ResolvedLocation",
]
