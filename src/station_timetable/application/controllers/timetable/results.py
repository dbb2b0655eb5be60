"""Results of timetable operations."""

from dataclasses import dataclass

from station_timetable.domain.models import (
    CauseCategories,
    Station,
    TimetableRowType,
    Train,
    TrainCategory,
)
from station_timetable.domain.ports import StationNameMapper


@dataclass(frozen=True)
class SettingsUpdated:
    """Updated selections. None leaves the current selection unchanged."""

    train_categories: frozenset[TrainCategory] | None = None
    timetable_types: frozenset[TimetableRowType] | None = None


@dataclass(frozen=True)
class SettingsFailed:
    """Stored selections could not be read or written."""

    message: str | None


class LoadTimetable:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        station: Station
        timetable: tuple[Train, ...]

    @dataclass(frozen=True)
    class Error:
        message: str | None


class ReloadTimetable:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        timetable: tuple[Train, ...]

    @dataclass(frozen=True)
    class Error:
        message: str | None


class LoadStationNames:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        station_name_mapper: StationNameMapper

    @dataclass(frozen=True)
    class Error:
        message: str | None


class LoadCauseCategories:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        categories: CauseCategories

    @dataclass(frozen=True)
    class Error:
        message: str | None


TimetableResult = (
    SettingsUpdated
    | SettingsFailed
    | LoadTimetable.Loading
    | LoadTimetable.Success
    | LoadTimetable.Error
    | ReloadTimetable.Loading
    | ReloadTimetable.Success
    | ReloadTimetable.Error
    | LoadStationNames.Loading
    | LoadStationNames.Success
    | LoadStationNames.Error
    | LoadCauseCategories.Loading
    | LoadCauseCategories.Success
    | LoadCauseCategories.Error
)
