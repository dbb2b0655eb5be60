"""Station repository that caches the station list locally."""

import logging
from collections.abc import AsyncIterator

from station_timetable.adapters.cache.station_cache import StationCache
from station_timetable.adapters.digitraffic_api.http_client import DigitrafficHttpClient
from station_timetable.adapters.digitraffic_api.mappers import station_to_domain
from station_timetable.adapters.repositories.localized_station_names import (
    LocalizedStationNames,
)
from station_timetable.adapters.store import ComputeOnce, Store
from station_timetable.domain.errors import StationNotFoundError
from station_timetable.domain.models import AnyStoreResponse, Station, StationType
from station_timetable.domain.ports.station_name_mapper import StationNameMapper
from station_timetable.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)

# Store key for the list of all stations. Any other key is a station code.
ALL_STATIONS = 0

# Kempele is incorrectly marked as having no passenger traffic.
DEFAULT_ALLOWED_STATION_CODES = frozenset({769})

_LISTED_STATION_TYPES = (StationType.STATION, StationType.STOPPING_POINT)


class _StationSourceOfTruth:
    """Reads and writes the station store's data through the station cache."""

    def __init__(self, cache: StationCache) -> None:
        self._cache = cache

    async def read(self, key: int) -> list[Station] | None:
        if key == ALL_STATIONS:
            stations = await self._cache.read_all()
            return stations or None
        station = await self._cache.read(key)
        return [station] if station is not None else None

    async def write(self, key: int, value: list[Station]) -> None:
        # The fetcher always returns every station, whatever the key.
        await self._cache.replace_all(value)

    async def delete(self, key: int) -> None:
        if key == ALL_STATIONS:
            await self._cache.replace_all([])


class StoreBackedStationRepository(StationRepository):
    """Adapter for the station repository backed by the Digitraffic API and SQLite."""

    def __init__(
        self,
        http_client: DigitrafficHttpClient,
        cache: StationCache,
        locale: str | None = None,
        allowed_station_codes: frozenset[int] | set[int] = DEFAULT_ALLOWED_STATION_CODES,
        country_code: str = "FI",
    ) -> None:
        """Initialize the repository.

        Args:
            http_client: Client for the Digitraffic API.
            cache: Local station cache.
            locale: Locale of the station names.
            allowed_station_codes: Stations listed even though they have no passenger traffic.
            country_code: Only stations in this country are listed.
        """
        self._http_client = http_client
        self._locale = locale
        self._allowed_station_codes = frozenset(allowed_station_codes)
        self._country_code = country_code
        self._store: Store[int, list[Station]] = Store(
            fetcher=self._fetch_all_stations,
            source_of_truth=_StationSourceOfTruth(cache),
            name="stations",
        )
        self._name_mapper: ComputeOnce[StationNameMapper] = ComputeOnce(
            self._create_name_mapper, name="station name mapper"
        )

    async def _fetch_all_stations(self, _key: int) -> list[Station]:
        entities = await self._http_client.fetch_stations()
        stations = [
            station_to_domain(entity)
            for entity in entities
            if (entity.passenger_traffic or entity.code in self._allowed_station_codes)
            and entity.country_code == self._country_code
        ]
        stations = [station for station in stations if station.type in _LISTED_STATION_TYPES]
        logger.info(f"Fetched {len(stations)} stations")
        return stations

    async def _create_name_mapper(self) -> StationNameMapper:
        stations = await self._store.get(ALL_STATIONS)
        return LocalizedStationNames.from_stations(stations or [], self._locale)

    def fetch_stations(self) -> AsyncIterator[AnyStoreResponse[list[Station]]]:
        return self._store.stream(ALL_STATIONS, refresh=True)

    async def fetch_station(self, station_code: int) -> Station:
        if station_code <= 0:
            raise ValueError(f"Station code must be positive, got {station_code}")
        stations = await self._store.get(station_code) or []
        for station in stations:
            if station.code == station_code:
                return station
        raise StationNotFoundError(station_code)

    async def get_station_name_mapper(self) -> StationNameMapper:
        return await self._name_mapper.get()
