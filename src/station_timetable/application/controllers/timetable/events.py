"""Events of the station timetable."""

from dataclasses import dataclass

from station_timetable.domain.models import Station, TimetableRowType, TrainCategory


class TimetableEvent:
    """Events accepted by the timetable controller."""

    @dataclass(frozen=True)
    class LoadTimetable:
        station_code: int

    @dataclass(frozen=True)
    class ReloadTimetable:
        station: Station

    @dataclass(frozen=True)
    class SelectCategories:
        categories: frozenset[TrainCategory]

    @dataclass(frozen=True)
    class SelectTimetableTypes:
        types: frozenset[TimetableRowType]


AnyTimetableEvent = (
    TimetableEvent.LoadTimetable
    | TimetableEvent.ReloadTimetable
    | TimetableEvent.SelectCategories
    | TimetableEvent.SelectTimetableTypes
)
