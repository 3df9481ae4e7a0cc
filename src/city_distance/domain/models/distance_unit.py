"""Distance unit domain model."""

from enum import Enum

from city_distance.domain.errors import InvalidUsageError


class DistanceUnit(str, Enum):
    """Unit a distance is reported in."""

    KILOMETERS = "km"
    MILES = "miles"

    @classmethod
    def from_token(cls, token: str) -> "DistanceUnit":
        """Parse a command-line unit token ('km' or 'miles').

        Raises:
            InvalidUsageError: If the token names no known unit.
        """
        for unit in cls:
            if unit.value == token:
                return unit
        raise InvalidUsageError(f"unit must be either 'km' or 'miles', got '{token}'")
