"""Outcome of a single geocoding lookup.

A lookup either finds a location or finds nothing. Failures (network,
malformed response) are raised as exceptions and never appear here.
"""

from dataclasses import dataclass

from city_distance.domain.models.resolved_location import ResolvedLocation


@dataclass(frozen=True)
class Found:
    """The provider matched the query; its first candidate is authoritative."""

    query: str
    location: ResolvedLocation


@dataclass(frozen=True)
class NotFound:
    """The provider returned no candidates for the query."""

    query: str
    status: str = "ZERO_RESULTS"


LookupOutcome = Found | NotFound
