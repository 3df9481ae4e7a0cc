"""Distance result domain model."""

from dataclasses import dataclass

from city_distance.domain.models.distance_unit import DistanceUnit
from city_distance.domain.models.resolved_location import ResolvedLocation


@dataclass(frozen=True)
class DistanceResult:
    """Distance between two resolved locations, in the requested unit."""

    origin: ResolvedLocation
    destination: ResolvedLocation
    unit: DistanceUnit
    distance: float

    def to_dict(self) -> dict[str, object]:
        """Serialize for JSON output."""
        return {
            "origin": _location_to_dict(self.origin),
            "destination": _location_to_dict(self.destination),
            "unit": self.unit.value,
            "distance": self.distance,
        }


def _location_to_dict(location: ResolvedLocation) -> dict[str, object]:
    return {
        "address": location.formatted_address,
        "latitude": location.coordinate.latitude,
        "longitude": location.coordinate.longitude,
    }
