"""Station repository port."""

from collections.abc import AsyncIterator
from typing import Protocol

from station_timetable.domain.models.station import Station
from station_timetable.domain.models.store_response import AnyStoreResponse
from station_timetable.domain.ports.station_name_mapper import StationNameMapper


class StationRepository(Protocol):
    """Port for retrieving station information."""

    def fetch_stations(self) -> AsyncIterator[AnyStoreResponse[list[Station]]]:
        """Stream all stations: cached data first, then the refreshed data."""
        ...

    async def fetch_station(self, station_code: int) -> Station:
        """Fetch a single station by its UIC code."""
        ...

    async def get_station_name_mapper(self) -> StationNameMapper:
        """Get the station name mapper."""
        ...
