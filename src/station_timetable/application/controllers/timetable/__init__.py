"""Station timetable controller."""

from station_timetable.application.controllers.timetable.controller import TimetableController
from station_timetable.application.controllers.timetable.events import (
    AnyTimetableEvent,
    TimetableEvent,
)
from station_timetable.application.controllers.timetable.results import (
    LoadCauseCategories,
    LoadStationNames,
    LoadTimetable,
    ReloadTimetable,
    SettingsFailed,
    SettingsUpdated,
    TimetableResult,
)
from station_timetable.application.controllers.timetable.state import TimetableState

__all__ = [
    "AnyTimetableEvent",
    "LoadCauseCategories",
    "LoadStationNames",
    "LoadTimetable",
    "ReloadTimetable",
    "SettingsFailed",
    "SettingsUpdated",
    "TimetableController",
    "TimetableEvent",
    "TimetableResult",
    "TimetableState",
]
