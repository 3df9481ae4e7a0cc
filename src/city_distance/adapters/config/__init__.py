"""Configuration adapters."""

from city_distance.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
