"""Controller of the train details."""

import logging
from collections.abc import AsyncIterator
from typing import assert_never

from station_timetable.application.controllers.base import Controller
from station_timetable.application.controllers.train_details.events import (
    AnyTrainDetailsEvent,
    TrainDetailsEvent,
)
from station_timetable.application.controllers.train_details.results import (
    LoadCauseCategories,
    LoadNameMapper,
    LoadTrainDetails,
    ReloadTrainDetails,
    TrainDetailsResult,
)
from station_timetable.application.controllers.train_details.state import TrainDetailsState
from station_timetable.domain.errors import TrainNotFoundError
from station_timetable.domain.models import Train
from station_timetable.domain.ports import StationRepository, TrainRepository

logger = logging.getLogger(__name__)


class TrainDetailsController(
    Controller[AnyTrainDetailsEvent, TrainDetailsResult, TrainDetailsState]
):
    """Loads a single train and refreshes it on request."""

    def __init__(
        self, train_repository: TrainRepository, station_repository: StationRepository
    ) -> None:
        super().__init__(TrainDetailsState())
        self._train_repository = train_repository
        self._station_repository = station_repository

    def startup_operations(self) -> list[AsyncIterator[TrainDetailsResult]]:
        return [self._load_name_mapper(), self._load_cause_categories()]

    def handle(self, event: AnyTrainDetailsEvent) -> AsyncIterator[TrainDetailsResult]:
        match event:
            case TrainDetailsEvent.LoadTrain(departure_date=departure_date, number=number):
                return self._load_train(departure_date, number)
            case TrainDetailsEvent.ReloadTrain(train=train):
                return self._reload_train(train)
            case _:
                assert_never(event)

    async def _load_train(
        self, departure_date: str, number: int
    ) -> AsyncIterator[TrainDetailsResult]:
        yield LoadTrainDetails.Loading()
        try:
            train = await self._train_repository.train(departure_date, number)
            if train is None:
                raise TrainNotFoundError(number, departure_date)
        except Exception as e:
            logger.error(f"Failed to load train {number} on {departure_date}: {e}")
            yield LoadTrainDetails.Error(str(e))
            return
        yield LoadTrainDetails.Success(train)

    async def _reload_train(self, train: Train) -> AsyncIterator[TrainDetailsResult]:
        yield ReloadTrainDetails.Loading()
        try:
            reloaded = await self._train_repository.train(
                train.departure_date_string, train.number, train.version
            )
        except Exception as e:
            logger.warning(f"Failed to reload train {train.number}: {e}")
            yield ReloadTrainDetails.Error(str(e))
            return
        # No data means the train has not changed since its version
        yield ReloadTrainDetails.Success(reloaded if reloaded is not None else train)

    async def _load_name_mapper(self) -> AsyncIterator[TrainDetailsResult]:
        yield LoadNameMapper.Loading()
        try:
            mapper = await self._station_repository.get_station_name_mapper()
        except Exception as e:
            logger.error(f"Failed to load station names: {e}")
            yield LoadNameMapper.Error(str(e))
            return
        yield LoadNameMapper.Success(mapper)

    async def _load_cause_categories(self) -> AsyncIterator[TrainDetailsResult]:
        yield LoadCauseCategories.Loading()
        try:
            categories = await self._train_repository.all_cause_categories()
        except Exception as e:
            logger.error(f"Failed to load delay cause categories: {e}")
            yield LoadCauseCategories.Error(str(e))
            return
        yield LoadCauseCategories.Success(categories)
