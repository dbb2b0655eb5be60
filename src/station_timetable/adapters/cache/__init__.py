"""Local persistence adapters."""

from station_timetable.adapters.cache.cause_category_cache import CauseCategoryCache
from station_timetable.adapters.cache.database import create_database
from station_timetable.adapters.cache.station_cache import StationCache

__all__ = ["CauseCategoryCache", "StationCache", "create_database"]
