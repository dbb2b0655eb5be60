"""Train details controller."""

from station_timetable.application.controllers.train_details.controller import (
    TrainDetailsController,
)
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

__all__ = [
    "AnyTrainDetailsEvent",
    "LoadCauseCategories",
    "LoadNameMapper",
    "LoadTrainDetails",
    "ReloadTrainDetails",
    "TrainDetailsController",
    "TrainDetailsEvent",
    "TrainDetailsResult",
    "TrainDetailsState",
]
