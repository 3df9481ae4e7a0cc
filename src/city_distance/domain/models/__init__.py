"""Domain models for city distance lookups."""

from city_distance.domain.models.coordinate import Coordinate
from city_distance.domain.models.distance_result import DistanceResult
from city_distance.domain.models.distance_unit import DistanceUnit
from city_distance.domain.models.lookup_outcome import Found, LookupOutcome, NotFound
from city_distance.domain.models.resolved_location import ResolvedLocation

__all__ = [
    "Coordinate",
    "DistanceResult",
    "DistanceUnit",
    "Found",
    "LookupOutcome",
    "NotFound",
    "ResolvedLocation",
]
