"""Coordinate domain model."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A point on the earth's surface in decimal degrees."""

    latitude: float  # [-90, 90]
    longitude: float  # [-180, 180]

    def to_radians(self) -> tuple[float, float]:
        """Return (latitude, longitude) converted to radians."""
        return math.radians(self.latitude), math.radians(self.longitude)
