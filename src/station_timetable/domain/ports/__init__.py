"""Ports (interfaces) for the ports-and-adapters architecture."""

from station_timetable.domain.ports.location_service import LocationService
from station_timetable.domain.ports.settings_repository import SettingsRepository
from station_timetable.domain.ports.station_name_mapper import (
    StationNameMapper,
    rename,
    rename_and_sort,
)
from station_timetable.domain.ports.station_repository import StationRepository
from station_timetable.domain.ports.train_repository import TrainRepository

__all__ = [
    "LocationService",
    "SettingsRepository",
    "StationNameMapper",
    "StationRepository",
    "TrainRepository",
    "rename",
    "rename_and_sort",
]
