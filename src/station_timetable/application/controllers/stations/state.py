"""State of the station list."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import assert_never

from station_timetable.application.controllers.stations.results import (
    FetchLocation,
    LoadNameMapper,
    LoadStations,
    RecentStationsFailed,
    RecentStationsUpdated,
    StationsResult,
)
from station_timetable.domain.models import Station
from station_timetable.domain.ports import StationNameMapper, rename_and_sort

EARTH_RADIUS_METERS = 6_371_000.0


def distance_between(
    latitude_first: float, longitude_first: float, latitude_second: float, longitude_second: float
) -> float:
    """Great-circle distance in meters using the haversine formula."""
    phi_first = math.radians(latitude_first)
    phi_second = math.radians(latitude_second)
    delta_phi = math.radians(latitude_second - latitude_first)
    delta_lambda = math.radians(longitude_second - longitude_first)
    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi_first) * math.cos(phi_second) * math.sin(delta_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(a))


def find_nearest(
    stations: Iterable[Station], latitude: float | None, longitude: float | None
) -> Station | None:
    if latitude is None or longitude is None:
        return None
    return min(
        stations,
        key=lambda station: distance_between(
            station.latitude, station.longitude, latitude, longitude
        ),
        default=None,
    )


@dataclass(frozen=True)
class StationsState:
    """State of the station list and the nearest station selection."""

    stations: tuple[Station, ...] = ()
    recent_stations: tuple[int, ...] = ()
    name_mapper: StationNameMapper | None = field(default=None, repr=False)
    _is_loading_stations: bool = field(default=False, repr=False)
    _is_loading_name_mapper: bool = field(default=False, repr=False)
    is_reloading_stations: bool = False
    select_nearest: bool = False
    is_fetching_location: bool = False
    latitude: float | None = None
    longitude: float | None = None
    nearest_station: Station | None = None
    error_message: str | None = None

    @property
    def is_loading(self) -> bool:
        return self._is_loading_stations or self._is_loading_name_mapper

    def _renamed(self, stations: Iterable[Station]) -> tuple[Station, ...]:
        if self.name_mapper is None:
            return tuple(stations)
        return tuple(rename_and_sort(self.name_mapper, list(stations)))

    def reduce(self, result: StationsResult) -> StationsState:
        match result:
            case LoadStations.Loading():
                return replace(self, _is_loading_stations=True)
            case LoadStations.Reloading():
                return replace(self, is_reloading_stations=True)
            case LoadStations.NoNewData():
                return replace(self, _is_loading_stations=False, is_reloading_stations=False)
            case LoadStations.Success(stations=stations):
                renamed = self._renamed(stations)
                nearest = self.nearest_station
                if self.select_nearest and not self.is_fetching_location:
                    nearest = find_nearest(renamed, self.latitude, self.longitude)
                return replace(
                    self,
                    stations=renamed,
                    _is_loading_stations=False,
                    is_reloading_stations=False,
                    nearest_station=nearest,
                )
            case LoadStations.Error(message=message):
                return replace(
                    self,
                    _is_loading_stations=False,
                    is_reloading_stations=False,
                    error_message=message,
                )
            case RecentStationsUpdated(station_codes=codes):
                return replace(self, recent_stations=codes)
            case RecentStationsFailed(message=message):
                return replace(self, error_message=message)
            case LoadNameMapper.Loading():
                return replace(self, _is_loading_name_mapper=True)
            case LoadNameMapper.Success(mapper=mapper):
                return replace(
                    self,
                    name_mapper=mapper,
                    _is_loading_name_mapper=False,
                    stations=tuple(rename_and_sort(mapper, list(self.stations))),
                )
            case LoadNameMapper.Error(message=message):
                return replace(self, _is_loading_name_mapper=False, error_message=message)
            case FetchLocation.Fetching():
                return replace(
                    self, select_nearest=True, nearest_station=None, is_fetching_location=True
                )
            case FetchLocation.Success(latitude=latitude, longitude=longitude):
                return replace(
                    self,
                    is_fetching_location=False,
                    latitude=latitude,
                    longitude=longitude,
                    nearest_station=(
                        None
                        if self._is_loading_stations
                        else find_nearest(self.stations, latitude, longitude)
                    ),
                )
            case FetchLocation.Error(message=message):
                return replace(
                    self,
                    is_fetching_location=False,
                    select_nearest=False,
                    error_message=message,
                )
            case FetchLocation.Cancel():
                return replace(
                    self, is_fetching_location=False, select_nearest=False, nearest_station=None
                )
            case _:
                assert_never(result)
