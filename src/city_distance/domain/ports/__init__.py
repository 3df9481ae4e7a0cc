"""Ports (interfaces) for the ports-and-adapters architecture."""

from city_distance.domain.ports.geocoder import Geocoder

__all__ = ["Geocoder"]
