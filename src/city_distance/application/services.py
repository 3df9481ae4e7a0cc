"""Application services (use cases) for distance lookups."""

import asyncio
import logging
from typing import TYPE_CHECKING

from city_distance.domain.distance import distance
from city_distance.domain.errors import LocationNotFoundError, LookupTimeoutError
from city_distance.domain.models import (
    DistanceResult,
    DistanceUnit,
    Found,
    LookupOutcome,
    NotFound,
    ResolvedLocation,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from city_distance.domain.ports import Geocoder


class CityDistanceService:
    """Service resolving two places concurrently and measuring the distance between them."""

    def __init__(self, geocoder: "Geocoder", timeout_seconds: float | None = None) -> None:
        """Initialize with a geocoder and an optional deadline for both lookups.

        Args:
            geocoder: Geocoder used for both lookups.
            timeout_seconds: Deadline shared by both lookups; None waits indefinitely.
        """
        self._geocoder = geocoder
        self._timeout_seconds = timeout_seconds

    async def _lookup(self, query: str, pending: list[str]) -> LookupOutcome:
        """Resolve one query and mark it as answered."""
        outcome = await self._geocoder.resolve(query)
        pending.remove(query)
        return outcome

    async def _gather_outcomes(
        self, query_a: str, query_b: str, pending: list[str]
    ) -> tuple[LookupOutcome, LookupOutcome]:
        """Run both lookups concurrently and wait for both outcomes.

        The first lookup failure cancels the other one and is re-raised as is.
        """
        try:
            async with asyncio.TaskGroup() as group:
                task_a = group.create_task(self._lookup(query_a, pending))
                task_b = group.create_task(self._lookup(query_b, pending))
        except ExceptionGroup as group_error:
            raise group_error.exceptions[0] from None

        return task_a.result(), task_b.result()

    async def _resolve_both(
        self, query_a: str, query_b: str
    ) -> tuple[LookupOutcome, LookupOutcome]:
        """Gather both outcomes within the configured deadline."""
        pending = [query_a, query_b]
        try:
            async with asyncio.timeout(self._timeout_seconds):
                return await self._gather_outcomes(query_a, query_b, pending)
        except TimeoutError as e:
            unanswered = pending[0] if pending else query_a
            logger.warning(f"Lookup for '{unanswered}' exceeded {self._timeout_seconds}s")
            raise LookupTimeoutError(unanswered, self._timeout_seconds) from e

    @staticmethod
    def _require_found(outcome: LookupOutcome) -> ResolvedLocation:
        """Return the location of a Found outcome or raise for NotFound."""
        if isinstance(outcome, Found):
            return outcome.location
        if isinstance(outcome, NotFound):
            logger.warning(f"No location found for '{outcome.query}' ({outcome.status})")
            raise LocationNotFoundError(outcome.query, outcome.status)
        raise TypeError(f"Unexpected lookup outcome: {outcome!r}")

    async def measure(
        self, query_a: str, query_b: str, unit: DistanceUnit = DistanceUnit.KILOMETERS
    ) -> DistanceResult:
        """Resolve both places and compute the distance between them.

        Raises:
            LocationNotFoundError: If either place has no match.
            TransportError: If either lookup could not reach the provider.
            DecodeError: If either response could not be parsed.
            LookupTimeoutError: If the lookups did not finish before the deadline.
        """
        outcome_a, outcome_b = await self._resolve_both(query_a, query_b)

        origin = self._require_found(outcome_a)
        destination = self._require_found(outcome_b)

        result = DistanceResult(
            origin=origin,
            destination=destination,
            unit=unit,
            distance=distance(origin.coordinate, destination.coordinate, unit),
        )
        logger.info(
            f"{origin.formatted_address} -> {destination.formatted_address}: "
            f"{result.distance:f} {unit.value}"
        )
        return result

    async def get_distance(
        self, query_a: str, query_b: str, unit: DistanceUnit = DistanceUnit.KILOMETERS
    ) -> float:
        """Return only the distance between two places in the given unit."""
        result = await self.measure(query_a, query_b, unit)
        return result.distance
