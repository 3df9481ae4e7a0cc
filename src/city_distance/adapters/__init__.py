"""Adapters layer - external system integrations."""

from city_distance.adapters.config import AppConfig
from city_distance.adapters.google_api import GoogleGeocoder

__all__ = ["AppConfig", "GoogleGeocoder"]
