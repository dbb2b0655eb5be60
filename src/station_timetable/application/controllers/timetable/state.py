"""State of the station timetable."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import assert_never

from station_timetable.application.controllers.timetable.results import (
    LoadCauseCategories,
    LoadStationNames,
    LoadTimetable,
    ReloadTimetable,
    SettingsFailed,
    SettingsUpdated,
    TimetableResult,
)
from station_timetable.application.services.timetable_normalizer import timetable_entries
from station_timetable.domain.models import (
    CauseCategories,
    Station,
    Stop,
    TimetableRowType,
    Train,
    TrainCategory,
)
from station_timetable.domain.ports import StationNameMapper

ALL_TRAIN_CATEGORIES = frozenset(TrainCategory)
ALL_TIMETABLE_TYPES = frozenset(TimetableRowType)


@dataclass(frozen=True)
class TimetableState:
    """State of the timetable of a single station.

    A failed load clears the station and its timetable. A failed reload keeps the
    timetable that was shown before and only sets the error message.
    """

    _is_loading_timetable: bool = field(default=True, repr=False)
    loading_timetable_failed: bool = False
    is_reloading_timetable: bool = False
    station: Station | None = None
    timetable: tuple[Train, ...] = ()
    selected_train_categories: frozenset[TrainCategory] = ALL_TRAIN_CATEGORIES
    selected_timetable_types: frozenset[TimetableRowType] = ALL_TIMETABLE_TYPES
    error_message: str | None = None
    _is_loading_station_names: bool = field(default=False, repr=False)
    station_name_mapper: StationNameMapper | None = field(default=None, repr=False)
    _is_loading_cause_categories: bool = field(default=False, repr=False)
    cause_categories: CauseCategories | None = None

    @property
    def is_loading_timetable(self) -> bool:
        return self._is_loading_timetable

    @property
    def is_loading_cause_categories(self) -> bool:
        return self._is_loading_cause_categories

    @property
    def is_loading(self) -> bool:
        return self._is_loading_timetable or self._is_loading_station_names

    def entries(self, now: datetime, cutoff_minutes: int = 5) -> list[tuple[Train, Stop]]:
        """Return the timetable entries of the selected train categories and row types.

        Trains that arrived or departed more than cutoff_minutes before now are left out.
        """
        if self.station is None:
            return []
        trains = [
            train for train in self.timetable if train.category in self.selected_train_categories
        ]
        return timetable_entries(
            trains,
            self.station.code,
            set(self.selected_timetable_types),
            now - timedelta(minutes=cutoff_minutes),
        )

    def reduce(self, result: TimetableResult) -> TimetableState:
        match result:
            case LoadTimetable.Loading():
                return replace(
                    self,
                    _is_loading_timetable=True,
                    loading_timetable_failed=False,
                    station=None,
                    timetable=(),
                )
            case LoadTimetable.Success(station=station, timetable=timetable):
                return replace(
                    self,
                    _is_loading_timetable=False,
                    loading_timetable_failed=False,
                    station=station,
                    timetable=timetable,
                )
            case LoadTimetable.Error(message=message):
                return replace(
                    self,
                    _is_loading_timetable=False,
                    loading_timetable_failed=True,
                    error_message=message,
                    station=None,
                    timetable=(),
                )
            case SettingsUpdated(train_categories=categories, timetable_types=types):
                return replace(
                    self,
                    selected_train_categories=(
                        categories if categories is not None else self.selected_train_categories
                    ),
                    selected_timetable_types=(
                        types if types is not None else self.selected_timetable_types
                    ),
                )
            case SettingsFailed(message=message):
                return replace(self, error_message=message)
            case LoadStationNames.Loading():
                return replace(self, _is_loading_station_names=True, station_name_mapper=None)
            case LoadStationNames.Success(station_name_mapper=mapper):
                return replace(self, _is_loading_station_names=False, station_name_mapper=mapper)
            case LoadStationNames.Error(message=message):
                return replace(self, _is_loading_station_names=False, error_message=message)
            case ReloadTimetable.Loading():
                return replace(self, is_reloading_timetable=True)
            case ReloadTimetable.Success(timetable=timetable):
                return replace(self, is_reloading_timetable=False, timetable=timetable)
            case ReloadTimetable.Error(message=message):
                return replace(self, is_reloading_timetable=False, error_message=message)
            case LoadCauseCategories.Loading():
                return replace(self, _is_loading_cause_categories=True)
            case LoadCauseCategories.Success(categories=categories):
                return replace(
                    self, _is_loading_cause_categories=False, cause_categories=categories
                )
            case LoadCauseCategories.Error(message=message):
                return replace(self, _is_loading_cause_categories=False, error_message=message)
            case _:
                assert_never(result)
