"""Settings repository port."""

from typing import Protocol

from station_timetable.domain.models.timetable_row import TimetableRowType
from station_timetable.domain.models.train import TrainCategory


class SettingsRepository(Protocol):
    """Port for reading and storing application settings."""

    async def station(self) -> int | None:
        """Get the UIC code of the most recently selected station."""
        ...

    async def set_station(self, station_code: int) -> None:
        """Select a station and add it to the recent stations."""
        ...

    async def recent_stations(self) -> list[int]:
        """Get the recently selected stations, most recent first."""
        ...

    async def train_categories(self) -> set[TrainCategory] | None:
        """Get the selected train categories, or None if never selected."""
        ...

    async def set_train_categories(self, categories: set[TrainCategory]) -> None:
        ...

    async def timetable_types(self) -> set[TimetableRowType] | None:
        """Get the selected timetable row types, or None if never selected."""
        ...

    async def set_timetable_types(self, types: set[TimetableRowType]) -> None:
        ...
