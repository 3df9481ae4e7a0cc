"""Tests for application services."""

import asyncio
from unittest.mock import patch

import pytest

from city_distance.adapters.google_api import GoogleGeocoder
from city_distance.application.services import CityDistanceService
from city_distance.domain.errors import (
    DecodeError,
    LocationNotFoundError,
    LookupTimeoutError,
    TransportError,
)
from city_distance.domain.models import (
    Coordinate,
    DistanceUnit,
    Found,
    LookupOutcome,
    NotFound,
    ResolvedLocation,
)
from tests.test_google_geocoder import AddressSession, FakeResponse, geocode_body

LONDON = ResolvedLocation(Coordinate(51.5074, -0.1278), "London, UK")
PARIS = ResolvedLocation(Coordinate(48.8566, 2.3522), "Paris, France")


class MockGeocoder:
    """Mock geocoder answering from a table of outcomes or errors."""

    def __init__(
        self,
        answers: dict[str, ResolvedLocation | BaseException | None],
        delays: dict[str, float] | None = None,
    ) -> None:
        """Initialize with answers per query; None means no match."""
        self.answers = answers
        self.delays = delays or {}
        self.started: list[str] = []
        self.finished: list[str] = []
        self.cancelled: list[str] = []

    async def resolve(self, query: str) -> LookupOutcome:
        """Return the configured outcome after the configured delay."""
        self.started.append(query)
        try:
            await asyncio.sleep(self.delays.get(query, 0))
        except asyncio.CancelledError:
            self.cancelled.append(query)
            raise
        self.finished.append(query)

        answer = self.answers[query]
        if isinstance(answer, BaseException):
            raise answer
        if answer is None:
            return NotFound(query=query)
        return Found(query=query, location=answer)


class BarrierGeocoder(MockGeocoder):
    """Geocoder whose lookups only complete once both are in flight."""

    def __init__(self, answers: dict[str, ResolvedLocation | BaseException | None]) -> None:
        super().__init__(answers)
        self._both_started = asyncio.Event()

    async def resolve(self, query: str) -> LookupOutcome:
        self.started.append(query)
        if len(self.started) == 2:
            self._both_started.set()
        await self._both_started.wait()
        return Found(query=query, location=self.answers[query])  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_when_both_found_then_returns_distance() -> None:
    """Given two resolvable places, when measuring, then returns their distance in km."""
    service = CityDistanceService(MockGeocoder({"London": LONDON, "Paris": PARIS}))

    result = await service.measure("London", "Paris", DistanceUnit.KILOMETERS)

    assert result.origin == LONDON
    assert result.destination == PARIS
    assert result.unit is DistanceUnit.KILOMETERS
    assert result.distance == pytest.approx(343.5, abs=1.0)


@pytest.mark.asyncio
async def test_get_distance_in_miles() -> None:
    """Given miles, when getting the distance, then returns km times the conversion constant."""
    service = CityDistanceService(MockGeocoder({"London": LONDON, "Paris": PARIS}))

    km = await service.get_distance("London", "Paris", DistanceUnit.KILOMETERS)
    miles = await service.get_distance("London", "Paris", DistanceUnit.MILES)

    assert isinstance(miles, float)
    assert miles == km * 0.621371192


@pytest.mark.asyncio
async def test_lookups_run_concurrently() -> None:
    """Given a geocoder that needs both lookups in flight, when measuring, then it completes."""
    geocoder = BarrierGeocoder({"London": LONDON, "Paris": PARIS})
    service = CityDistanceService(geocoder, timeout_seconds=1.0)

    result = await service.measure("London", "Paris")

    assert sorted(geocoder.started) == ["London", "Paris"]
    assert result.origin == LONDON


@pytest.mark.asyncio
async def test_results_keep_query_order_when_second_finishes_first() -> None:
    """Given the second lookup finishing first, when measuring, then origin is still the first."""
    geocoder = MockGeocoder(
        {"London": LONDON, "Paris": PARIS}, delays={"London": 0.05, "Paris": 0.0}
    )
    service = CityDistanceService(geocoder)

    result = await service.measure("London", "Paris")

    assert geocoder.finished == ["Paris", "London"]
    assert result.origin == LONDON
    assert result.destination == PARIS


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("answers", "missing"),
    [
        ({"London": LONDON, "Atlantis": None}, "Atlantis"),
        ({"London": None, "Atlantis": PARIS}, "London"),
    ],
)
async def test_when_either_not_found_then_raises_without_computing(
    answers: dict[str, ResolvedLocation | None], missing: str
) -> None:
    """Given one place without a match, when measuring, then raises and never computes."""
    service = CityDistanceService(MockGeocoder(answers))  # type: ignore[arg-type]

    with patch("city_distance.application.services.distance") as mock_distance:
        with pytest.raises(LocationNotFoundError) as exc_info:
            await service.measure("London", "Atlantis")

    mock_distance.assert_not_called()
    assert exc_info.value.query == missing


@pytest.mark.asyncio
async def test_when_not_found_then_other_lookup_still_completes() -> None:
    """Given a fast NotFound and a slow match, when measuring, then both lookups finish."""
    geocoder = MockGeocoder({"Atlantis": None, "Paris": PARIS}, delays={"Paris": 0.02})
    service = CityDistanceService(geocoder)

    with pytest.raises(LocationNotFoundError):
        await service.measure("Atlantis", "Paris")

    assert sorted(geocoder.finished) == ["Atlantis", "Paris"]


@pytest.mark.asyncio
async def test_when_one_body_undecodable_then_raises_decode_error() -> None:
    """Given one unparseable response and one success, when measuring, then raises DecodeError."""
    error = DecodeError("Paris", "malformed response")
    service = CityDistanceService(MockGeocoder({"London": LONDON, "Paris": error}))

    with patch("city_distance.application.services.distance") as mock_distance:
        with pytest.raises(DecodeError) as exc_info:
            await service.measure("London", "Paris")

    assert exc_info.value is error
    mock_distance.assert_not_called()


@pytest.mark.asyncio
async def test_when_google_body_truncated_for_one_query_then_raises_decode_error() -> None:
    """Given the real geocoder, one valid and one truncated body, then measuring raises."""
    session = AddressSession(
        {
            "London": FakeResponse(geocode_body(("London, UK", 51.5074, -0.1278))),
            "Paris": FakeResponse('{"status": "OK", "results": [{"formatted_address": "Par'),
        }
    )
    service = CityDistanceService(GoogleGeocoder(session))  # type: ignore[arg-type]

    with patch("city_distance.application.services.distance") as mock_distance:
        with pytest.raises(DecodeError) as exc_info:
            await service.measure("London", "Paris")

    assert exc_info.value.query == "Paris"
    assert "Paris" in [call["params"]["address"] for call in session.calls]
    mock_distance.assert_not_called()


@pytest.mark.asyncio
async def test_when_transport_fails_then_error_is_raised_verbatim_and_sibling_cancelled() -> None:
    """Given a transport failure, when measuring, then it propagates and the other is cancelled."""
    error = TransportError("London", "Connection refused")
    geocoder = MockGeocoder({"London": error, "Paris": PARIS}, delays={"Paris": 5.0})
    service = CityDistanceService(geocoder)

    with pytest.raises(TransportError) as exc_info:
        await service.measure("London", "Paris")

    assert exc_info.value is error
    assert geocoder.cancelled == ["Paris"]


@pytest.mark.asyncio
async def test_when_lookup_hangs_then_raises_timeout() -> None:
    """Given a lookup slower than the deadline, when measuring, then raises LookupTimeoutError."""
    geocoder = MockGeocoder({"London": LONDON, "Paris": PARIS}, delays={"Paris": 5.0})
    service = CityDistanceService(geocoder, timeout_seconds=0.05)

    with pytest.raises(LookupTimeoutError) as exc_info:
        await service.measure("London", "Paris")

    assert exc_info.value.query == "Paris"
    assert exc_info.value.timeout_seconds == 0.05
    assert geocoder.cancelled == ["Paris"]


@pytest.mark.asyncio
async def test_without_timeout_slow_lookups_complete() -> None:
    """Given no deadline, when lookups are slow, then the service waits for them."""
    geocoder = MockGeocoder({"London": LONDON, "Paris": PARIS}, delays={"London": 0.05})
    service = CityDistanceService(geocoder, timeout_seconds=None)

    distance_km = await service.get_distance("London", "Paris")

    assert distance_km == pytest.approx(343.5, abs=1.0)
