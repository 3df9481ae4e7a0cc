"""Application layer - use cases."""

from city_distance.application.services import CityDistanceService

__all__ = ["CityDistanceService"]
