"""Domain models for station timetables."""

from station_timetable.domain.models.delay_cause import (
    CauseCategories,
    CauseCategory,
    DelayCause,
    PassengerFriendlyName,
)
from station_timetable.domain.models.location import Location
from station_timetable.domain.models.station import Station, StationType
from station_timetable.domain.models.stop import Stop
from station_timetable.domain.models.store_response import (
    AnyStoreResponse,
    ResponseOrigin,
    StoreResponse,
)
from station_timetable.domain.models.timetable_row import (
    TimetableRow,
    TimetableRowType,
    arrival,
    departure,
)
from station_timetable.domain.models.train import Train, TrainCategory

__all__ = [
    "AnyStoreResponse",
    "CauseCategories",
    "CauseCategory",
    "DelayCause",
    "Location",
    "PassengerFriendlyName",
    "ResponseOrigin",
    "Station",
    "StationType",
    "Stop",
    "StoreResponse",
    "TimetableRow",
    "TimetableRowType",
    "Train",
    "TrainCategory",
    "arrival",
    "departure",
]
