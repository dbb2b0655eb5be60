"""Controller of the station list."""

import logging
from collections.abc import AsyncIterator
from typing import assert_never

from station_timetable.application.controllers.base import Controller
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
from station_timetable.application.controllers.stations.state import StationsState
from station_timetable.domain.models import AnyStoreResponse, Station, StoreResponse
from station_timetable.domain.ports import (
    LocationService,
    SettingsRepository,
    StationRepository,
)

logger = logging.getLogger(__name__)


def _to_result(response: AnyStoreResponse[list[Station]]) -> StationsResult:
    match response:
        case StoreResponse.Loading():
            return LoadStations.Reloading()
        case StoreResponse.Data(value=stations):
            return LoadStations.Success(tuple(stations))
        case StoreResponse.NoNewData():
            return LoadStations.NoNewData()
        case StoreResponse.Error(message=message):
            return LoadStations.Error(message)
        case _:
            assert_never(response)


class StationsController(Controller[AnyStationsEvent, StationsResult, StationsState]):
    """Lists the stations and selects a station manually or by location."""

    def __init__(
        self,
        station_repository: StationRepository,
        settings_repository: SettingsRepository,
        location_service: LocationService | None = None,
    ) -> None:
        super().__init__(StationsState())
        self._station_repository = station_repository
        self._settings_repository = settings_repository
        self._location_service = location_service

    def startup_operations(self) -> list[AsyncIterator[StationsResult]]:
        return [self._load_name_mapper(), self._load_recent_stations()]

    def handle(self, event: AnyStationsEvent) -> AsyncIterator[StationsResult]:
        match event:
            case StationsEvent.LoadStations():
                return self._load_stations()
            case StationsEvent.ReloadStations():
                return self._reload_stations()
            case StationsEvent.SelectNearestStation():
                return self._select_nearest_station()
            case StationsEvent.ShowStationList():
                return self._show_station_list()
            case StationsEvent.StationSelected(station=station):
                return self._station_selected(station)
            case _:
                assert_never(event)

    async def _load_stations(self) -> AsyncIterator[StationsResult]:
        yield LoadStations.Loading()
        async for response in self._station_repository.fetch_stations():
            yield _to_result(response)

    async def _reload_stations(self) -> AsyncIterator[StationsResult]:
        async for response in self._station_repository.fetch_stations():
            yield _to_result(response)

    async def _select_nearest_station(self) -> AsyncIterator[StationsResult]:
        yield FetchLocation.Fetching()
        if self._location_service is None:
            yield FetchLocation.Error("Location is not available")
            return
        try:
            location = await self._location_service.current_location()
        except Exception as e:
            logger.warning(f"Failed to get current location: {e}")
            yield FetchLocation.Error(str(e))
            return
        yield FetchLocation.Success(location.latitude, location.longitude)

    async def _show_station_list(self) -> AsyncIterator[StationsResult]:
        yield FetchLocation.Cancel()

    async def _station_selected(self, station: Station) -> AsyncIterator[StationsResult]:
        try:
            await self._settings_repository.set_station(station.code)
            recent = await self._settings_repository.recent_stations()
        except Exception as e:
            logger.error(f"Failed to store selected station {station.code}: {e}")
            yield RecentStationsFailed(str(e))
            return
        yield RecentStationsUpdated(tuple(recent))

    async def _load_name_mapper(self) -> AsyncIterator[StationsResult]:
        yield LoadNameMapper.Loading()
        try:
            mapper = await self._station_repository.get_station_name_mapper()
        except Exception as e:
            logger.error(f"Failed to load station names: {e}")
            yield LoadNameMapper.Error(str(e))
            return
        yield LoadNameMapper.Success(mapper)

    async def _load_recent_stations(self) -> AsyncIterator[StationsResult]:
        try:
            recent = await self._settings_repository.recent_stations()
        except Exception as e:
            logger.error(f"Failed to load recent stations: {e}")
            yield RecentStationsFailed(str(e))
            return
        yield RecentStationsUpdated(tuple(recent))
