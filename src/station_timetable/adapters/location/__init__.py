"""Location adapters."""

from station_timetable.adapters.location.fixed_location_service import FixedLocationService

__all__ = ["FixedLocationService"]
