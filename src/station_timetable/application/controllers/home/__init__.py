"""Home controller."""

from station_timetable.application.controllers.home.controller import (
    AnyHomeEvent,
    HomeController,
    HomeEvent,
)
from station_timetable.application.controllers.home.results import (
    HomeResult,
    LoadSettings,
    LoadStation,
)
from station_timetable.application.controllers.home.state import HomeState

__all__ = [
    "AnyHomeEvent",
    "HomeController",
    "HomeEvent",
    "HomeResult",
    "HomeState",
    "LoadSettings",
    "LoadStation",
]
