"""Great-circle distance between two places resolved via geocoding."""

__version__ = "0.1.0"
