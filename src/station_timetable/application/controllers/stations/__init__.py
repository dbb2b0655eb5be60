"""Station list controller."""

from station_timetable.application.controllers.stations.controller import StationsController
from station_timetable.application.controllers.stations.events import (
    AnyStationsEvent,
    StationsEvent,
)
from station_timetable.application.controllers.stations.results import (
    FetchLocation,
    LoadNameMapper,
    LoadStations,
    RecentStationsFailed,
    RecentStationsUpdated,
    StationsResult,
)
from station_timetable.application.controllers.stations.state import (
    StationsState,
    distance_between,
    find_nearest,
)

__all__ = [
    "AnyStationsEvent",
    "FetchLocation",
    "LoadNameMapper",
    "LoadStations",
    "RecentStationsFailed",
    "RecentStationsUpdated",
    "StationsController",
    "StationsEvent",
    "StationsResult",
    "StationsState",
    "distance_between",
    "find_nearest",
]
