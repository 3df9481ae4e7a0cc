"""Google Geocoding API adapter."""

from city_distance.adapters.google_api.google_geocoder import GoogleGeocoder
from city_distance.adapters.google_api.http_client import GoogleHttpClient

__all__ = ["GoogleGeocoder", "GoogleHttpClient"]
