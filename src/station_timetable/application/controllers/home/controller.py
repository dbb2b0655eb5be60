"""Controller of the home view."""

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import assert_never

from station_timetable.application.controllers.base import Controller
from station_timetable.application.controllers.home.results import (
    HomeResult,
    LoadSettings,
    LoadStation,
)
from station_timetable.application.controllers.home.state import HomeState
from station_timetable.domain.ports import SettingsRepository, StationRepository

logger = logging.getLogger(__name__)


class HomeEvent:
    @dataclass(frozen=True)
    class LoadMostRecentStation:
        pass


AnyHomeEvent = HomeEvent.LoadMostRecentStation


class HomeController(Controller[AnyHomeEvent, HomeResult, HomeState]):
    """Opens the most recently selected station instead of the home view.

    The station is loaded on start only when skip_home_screen is set.
    """

    def __init__(
        self,
        settings_repository: SettingsRepository,
        station_repository: StationRepository,
        skip_home_screen: bool = True,
    ) -> None:
        super().__init__(HomeState())
        self._settings_repository = settings_repository
        self._station_repository = station_repository
        self._skip_home_screen = skip_home_screen

    def startup_operations(self) -> list[AsyncIterator[HomeResult]]:
        return [self._load_most_recent_station()] if self._skip_home_screen else []

    def handle(self, event: AnyHomeEvent) -> AsyncIterator[HomeResult]:
        match event:
            case HomeEvent.LoadMostRecentStation():
                return self._load_most_recent_station()
            case _:
                assert_never(event)

    async def _load_most_recent_station(self) -> AsyncIterator[HomeResult]:
        yield LoadSettings.Loading()
        try:
            station_code = await self._settings_repository.station()
        except Exception as e:
            logger.error(f"Failed to load settings: {e}")
            yield LoadSettings.Error(str(e))
            return
        if station_code is None:
            yield LoadSettings.Success()
            return

        yield LoadStation.Loading()
        try:
            station = await self._station_repository.fetch_station(station_code)
        except Exception as e:
            logger.error(f"Failed to load station {station_code}: {e}")
            yield LoadStation.Error(str(e))
            return
        yield LoadStation.Success(station)
