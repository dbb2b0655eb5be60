"""Adapters layer - external system integrations."""

from station_timetable.adapters.config import AppConfig
from station_timetable.adapters.digitraffic_api import DigitrafficHttpClient
from station_timetable.adapters.repositories import (
    StoreBackedStationRepository,
    StoreBackedTrainRepository,
)
from station_timetable.adapters.settings import JsonSettingsRepository

__all__ = [
    "AppConfig",
    "DigitrafficHttpClient",
    "JsonSettingsRepository",
    "StoreBackedStationRepository",
    "StoreBackedTrainRepository",
]
