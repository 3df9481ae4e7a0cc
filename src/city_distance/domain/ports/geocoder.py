"""Geocoder port."""

from typing import Protocol

from city_distance.domain.models import LookupOutcome


class Geocoder(Protocol):
    """Port for resolving a free-text place name to a location."""

    async def resolve(self, query: str) -> LookupOutcome:
        """Resolve a place name.

        Returns Found with the provider's best match, or NotFound when nothing
        matched. Raises TransportError or DecodeError when the lookup fails.
        """
        ...
