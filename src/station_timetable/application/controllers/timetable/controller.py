"""Controller of the station timetable."""

import logging
from collections.abc import AsyncIterator
from typing import assert_never

from station_timetable.application.controllers.base import Controller
from station_timetable.application.controllers.timetable.events import (
    AnyTimetableEvent,
    TimetableEvent,
)
from station_timetable.application.controllers.timetable.results import (
    LoadCauseCategories,
    LoadStationNames,
    LoadTimetable,
    ReloadTimetable,
    SettingsFailed,
    SettingsUpdated,
    TimetableResult,
)
from station_timetable.application.controllers.timetable.state import TimetableState
from station_timetable.domain.models import Station, TimetableRowType, TrainCategory
from station_timetable.domain.ports import (
    SettingsRepository,
    StationRepository,
    TrainRepository,
)

logger = logging.getLogger(__name__)


class TimetableController(Controller[AnyTimetableEvent, TimetableResult, TimetableState]):
    """Loads the timetable of a station and keeps the user's selections."""

    def __init__(
        self,
        train_repository: TrainRepository,
        station_repository: StationRepository,
        settings_repository: SettingsRepository,
    ) -> None:
        super().__init__(TimetableState())
        self._train_repository = train_repository
        self._station_repository = station_repository
        self._settings_repository = settings_repository

    def startup_operations(self) -> list[AsyncIterator[TimetableResult]]:
        return [self._load_station_names(), self._load_settings(), self._load_cause_categories()]

    def handle(self, event: AnyTimetableEvent) -> AsyncIterator[TimetableResult]:
        match event:
            case TimetableEvent.LoadTimetable(station_code=station_code):
                return self._load_timetable(station_code)
            case TimetableEvent.ReloadTimetable(station=station):
                return self._reload_timetable(station)
            case TimetableEvent.SelectCategories(categories=categories):
                return self._select_categories(categories)
            case TimetableEvent.SelectTimetableTypes(types=types):
                return self._select_timetable_types(types)
            case _:
                assert_never(event)

    async def _load_timetable(self, station_code: int) -> AsyncIterator[TimetableResult]:
        yield LoadTimetable.Loading()
        try:
            station = await self._station_repository.fetch_station(station_code)
            trains = await self._train_repository.trains_at_station(station.short_code)
        except Exception as e:
            logger.error(f"Failed to load timetable for station {station_code}: {e}")
            yield LoadTimetable.Error(str(e))
            return
        yield LoadTimetable.Success(station, tuple(trains))

    async def _reload_timetable(self, station: Station) -> AsyncIterator[TimetableResult]:
        yield ReloadTimetable.Loading()
        try:
            trains = await self._train_repository.trains_at_station(station.short_code)
        except Exception as e:
            logger.warning(f"Failed to reload timetable for {station.short_code}: {e}")
            yield ReloadTimetable.Error(str(e))
            return
        yield ReloadTimetable.Success(tuple(trains))

    async def _select_categories(
        self, categories: frozenset[TrainCategory]
    ) -> AsyncIterator[TimetableResult]:
        yield SettingsUpdated(train_categories=frozenset(categories))
        try:
            await self._settings_repository.set_train_categories(set(categories))
        except Exception as e:
            logger.error(f"Failed to save train categories: {e}")
            yield SettingsFailed(str(e))

    async def _select_timetable_types(
        self, types: frozenset[TimetableRowType]
    ) -> AsyncIterator[TimetableResult]:
        yield SettingsUpdated(timetable_types=frozenset(types))
        try:
            await self._settings_repository.set_timetable_types(set(types))
        except Exception as e:
            logger.error(f"Failed to save timetable types: {e}")
            yield SettingsFailed(str(e))

    async def _load_settings(self) -> AsyncIterator[TimetableResult]:
        try:
            categories = await self._settings_repository.train_categories()
            types = await self._settings_repository.timetable_types()
        except Exception as e:
            logger.error(f"Failed to load timetable settings: {e}")
            yield SettingsFailed(str(e))
            return
        yield SettingsUpdated(
            train_categories=frozenset(categories) if categories is not None else None,
            timetable_types=frozenset(types) if types is not None else None,
        )

    async def _load_station_names(self) -> AsyncIterator[TimetableResult]:
        yield LoadStationNames.Loading()
        try:
            mapper = await self._station_repository.get_station_name_mapper()
        except Exception as e:
            logger.error(f"Failed to load station names: {e}")
            yield LoadStationNames.Error(str(e))
            return
        yield LoadStationNames.Success(mapper)

    async def _load_cause_categories(self) -> AsyncIterator[TimetableResult]:
        yield LoadCauseCategories.Loading()
        try:
            categories = await self._train_repository.all_cause_categories()
        except Exception as e:
            logger.error(f"Failed to load delay cause categories: {e}")
            yield LoadCauseCategories.Error(str(e))
            return
        yield LoadCauseCategories.Success(categories)
