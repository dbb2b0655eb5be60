"""Domain layer - core business logic and models."""

from station_timetable.domain.models import (
    Station,
    Stop,
    TimetableRow,
    Train,
)
from station_timetable.domain.ports import (
    SettingsRepository,
    StationNameMapper,
    StationRepository,
    TrainRepository,
)

__all__ = [
    "SettingsRepository",
    "Station",
    "StationNameMapper",
    "StationRepository",
    "Stop",
    "TimetableRow",
    "Train",
    "TrainRepository",
]
