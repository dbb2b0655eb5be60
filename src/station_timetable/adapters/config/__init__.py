"""Configuration adapters."""

from station_timetable.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
