"""Repository adapters combining the network client with local caches."""

from station_timetable.adapters.repositories.localized_station_names import (
    LocalizedStationNames,
)
from station_timetable.adapters.repositories.store_backed_station_repository import (
    StoreBackedStationRepository,
)
from station_timetable.adapters.repositories.store_backed_train_repository import (
    StoreBackedTrainRepository,
)

__all__ = [
    "LocalizedStationNames",
    "StoreBackedStationRepository",
    "StoreBackedTrainRepository",
]
