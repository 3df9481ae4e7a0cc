"""Resolved location domain model."""

from dataclasses import dataclass

from city_distance.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class ResolvedLocation:
    """A geocoded place: its coordinate and the provider's canonical address."""

    coordinate: Coordinate
    formatted_address: str
