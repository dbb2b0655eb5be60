"""State of the home view."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import assert_never

from station_timetable.application.controllers.home.results import (
    HomeResult,
    LoadSettings,
    LoadStation,
)
from station_timetable.domain.models import Station


@dataclass(frozen=True)
class HomeState:
    _is_loading_settings: bool = field(default=False, repr=False)
    _is_loading_station: bool = field(default=False, repr=False)
    station: Station | None = None
    error_message: str | None = None

    @property
    def is_loading(self) -> bool:
        return self._is_loading_settings or self._is_loading_station

    def reduce(self, result: HomeResult) -> HomeState:
        match result:
            case LoadSettings.Loading():
                return replace(self, _is_loading_settings=True)
            case LoadSettings.Success():
                return replace(self, _is_loading_settings=False)
            case LoadSettings.Error(message=message):
                return replace(self, _is_loading_settings=False, error_message=message)
            case LoadStation.Loading():
                return replace(self, _is_loading_station=True, _is_loading_settings=False)
            case LoadStation.Success(station=station):
                return replace(self, _is_loading_station=False, station=station)
            case LoadStation.Error(message=message):
                return replace(self, _is_loading_station=False, error_message=message)
            case _:
                assert_never(result)
