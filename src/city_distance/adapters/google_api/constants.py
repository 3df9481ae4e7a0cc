"""Constants for the Google Geocoding API adapter.

API Documentation: https://developers.google.com/maps/documentation/geocoding
"""

GOOGLE_GEOCODING_URL = "https://maps.googleapis.com/maps/api/geocode/json"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Envelope status values
STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"

# Characters of an error body kept in log messages
ERROR_BODY_EXCERPT = 500
