"""State of the train details."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import assert_never

from station_timetable.application.controllers.train_details.results import (
    LoadCauseCategories,
    LoadNameMapper,
    LoadTrainDetails,
    ReloadTrainDetails,
    TrainDetailsResult,
)
from station_timetable.application.services.delay_cause_aggregator import (
    delay_causes,
    passenger_friendly_name_for,
)
from station_timetable.application.services.timetable_normalizer import (
    commercial_stops,
    current_commercial_stop,
)
from station_timetable.domain.models import CauseCategories, Stop, Train
from station_timetable.domain.ports import StationNameMapper


@dataclass(frozen=True)
class TrainDetailsState:
    """State of the details of a single train. A failed reload keeps the train."""

    _is_loading_train: bool = field(default=False, repr=False)
    _is_loading_mapper: bool = field(default=False, repr=False)
    is_reloading: bool = False
    train: Train | None = None
    name_mapper: StationNameMapper | None = field(default=None, repr=False)
    cause_categories: CauseCategories | None = None
    error_message: str | None = None

    @property
    def is_loading(self) -> bool:
        return self._is_loading_train or self._is_loading_mapper

    def route(self) -> list[Stop]:
        """The train's commercial stops."""
        return commercial_stops(self.train) if self.train is not None else []

    def current_stop(self) -> Stop | None:
        return current_commercial_stop(self.train) if self.train is not None else None

    def delay_cause_names(self, locale: str | None = None) -> list[str]:
        """Passenger friendly names of the train's delay causes."""
        if self.train is None:
            return []
        categories = self.cause_categories or CauseCategories()
        return [
            passenger_friendly_name_for(categories, cause, locale)
            for cause in delay_causes(self.train)
        ]

    def reduce(self, result: TrainDetailsResult) -> TrainDetailsState:
        match result:
            case LoadTrainDetails.Loading():
                return replace(self, _is_loading_train=True)
            case LoadTrainDetails.Success(train=train):
                return replace(self, train=train, _is_loading_train=False)
            case LoadTrainDetails.Error(message=message):
                return replace(self, _is_loading_train=False, error_message=message)
            case ReloadTrainDetails.Loading():
                return replace(self, is_reloading=True)
            case ReloadTrainDetails.Success(train=train):
                return replace(self, is_reloading=False, train=train)
            case ReloadTrainDetails.Error(message=message):
                return replace(self, is_reloading=False, error_message=message)
            case LoadNameMapper.Loading():
                return replace(self, _is_loading_mapper=True)
            case LoadNameMapper.Success(mapper=mapper):
                return replace(self, name_mapper=mapper, _is_loading_mapper=False)
            case LoadNameMapper.Error(message=message):
                return replace(self, _is_loading_mapper=False, error_message=message)
            case LoadCauseCategories.Loading():
                return self
            case LoadCauseCategories.Success(categories=categories):
                return replace(self, cause_categories=categories)
            case LoadCauseCategories.Error(message=message):
                return replace(self, error_message=message)
            case _:
                assert_never(result)
