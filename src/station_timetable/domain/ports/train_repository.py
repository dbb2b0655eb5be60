"""Train repository port."""

from typing import Protocol

from station_timetable.domain.models.delay_cause import CauseCategories, CauseCategory
from station_timetable.domain.models.train import Train


class TrainRepository(Protocol):
    """Port for retrieving trains and delay cause categories."""

    async def train(
        self, departure_date: str, number: int, version: int | None = None
    ) -> Train | None:
        """Get a train by departure date (ISO format) and number.

        Returns None if the train has not changed since the given version.
        """
        ...

    async def latest_train(self, number: int, version: int | None = None) -> Train | None:
        """Get the latest train with the given number."""
        ...

    async def trains_at_station(self, station_short_code: str) -> list[Train]:
        """Get the trains arriving at or departing from the given station."""
        ...

    async def cause_categories(self) -> list[CauseCategory]:
        """Get the top level delay cause categories."""
        ...

    async def detailed_cause_categories(self) -> list[CauseCategory]:
        """Get the detailed delay cause categories."""
        ...

    async def third_level_cause_categories(self) -> list[CauseCategory]:
        """Get the third level delay cause categories."""
        ...

    async def all_cause_categories(self) -> CauseCategories:
        """Get the delay cause categories of all three levels."""
        ...
