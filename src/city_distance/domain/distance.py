"""Great-circle distance using the haversine formula.

The earth is modelled as a sphere with the mean radius of 6371 km.
"""

import math

from city_distance.domain.models import Coordinate, DistanceUnit

EARTH_RADIUS_KM = 6371.0
KM_TO_MILES = 0.621371192


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Return the great-circle distance in km between two coordinates."""
    phi1, _ = a.to_radians()
    phi2, _ = b.to_radians()
    delta_phi = math.radians(a.latitude - b.latitude)
    delta_lambda = math.radians(a.longitude - b.longitude)

    h = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    # Rounding can push h just outside [0, 1] for identical or antipodal points.
    h = min(1.0, max(0.0, h))

    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def km_to_miles(distance_km: float) -> float:
    """Convert kilometers to statute miles."""
    return distance_km * KM_TO_MILES


def distance(a: Coordinate, b: Coordinate, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> float:
    """Return the great-circle distance between two coordinates in the given unit."""
    distance_km = haversine_km(a, b)
    if unit is DistanceUnit.MILES:
        return km_to_miles(distance_km)
    return distance_km
