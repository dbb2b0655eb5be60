"""Train repository backed by the Digitraffic API."""

import asyncio
import logging
from dataclasses import dataclass

from station_timetable.adapters.cache.cause_category_cache import CauseCategoryCache
from station_timetable.adapters.digitraffic_api.http_client import DigitrafficHttpClient
from station_timetable.adapters.digitraffic_api.mappers import (
    cause_category_to_domain,
    train_to_domain,
    trains_to_domain,
)
from station_timetable.adapters.store import InMemorySourceOfTruth, Store
from station_timetable.domain.models import CauseCategories, CauseCategory, Train
from station_timetable.domain.ports.train_repository import TrainRepository

logger = logging.getLogger(__name__)

CATEGORY_LEVEL = 1
DETAILED_CATEGORY_LEVEL = 2
THIRD_LEVEL_CATEGORY_LEVEL = 3


@dataclass(frozen=True)
class TrainKey:
    """Identifies a single train request."""

    departure_date: str | None
    number: int
    version: int | None = None


@dataclass(frozen=True)
class StationTrainsKey:
    station_short_code: str
    arrived: int
    arriving: int
    departed: int
    departing: int


class _CauseCategorySourceOfTruth:
    def __init__(self, cache: CauseCategoryCache) -> None:
        self._cache = cache

    async def read(self, key: int) -> list[CauseCategory] | None:
        categories = await self._cache.read(key)
        return categories or None

    async def write(self, key: int, value: list[CauseCategory]) -> None:
        await self._cache.replace(key, value)

    async def delete(self, key: int) -> None:
        await self._cache.replace(key, [])


class StoreBackedTrainRepository(TrainRepository):
    """Adapter for the train repository.

    Trains are always fetched fresh and are not kept once returned; concurrent
    requests for the same train or the same station share one request. Delay cause categories rarely change and are
    cached in SQLite.
    """

    def __init__(
        self,
        http_client: DigitrafficHttpClient,
        cause_category_cache: CauseCategoryCache,
        arrived_trains: int = 5,
        arriving_trains: int = 20,
        departed_trains: int = 5,
        departing_trains: int = 20,
    ) -> None:
        self._http_client = http_client
        self._arrived_trains = arrived_trains
        self._arriving_trains = arriving_trains
        self._departed_trains = departed_trains
        self._departing_trains = departing_trains
        self._train_snapshots: InMemorySourceOfTruth[TrainKey, Train | None] = (
            InMemorySourceOfTruth()
        )
        self._station_trains_snapshots: InMemorySourceOfTruth[StationTrainsKey, list[Train]] = (
            InMemorySourceOfTruth()
        )
        self._train_store: Store[TrainKey, Train | None] = Store(
            fetcher=self._fetch_train,
            source_of_truth=self._train_snapshots,
            name="trains",
        )
        self._station_trains_store: Store[StationTrainsKey, list[Train]] = Store(
            fetcher=self._fetch_station_trains,
            source_of_truth=self._station_trains_snapshots,
            name="station trains",
        )
        self._category_store: Store[int, list[CauseCategory]] = Store(
            fetcher=self._fetch_cause_categories,
            source_of_truth=_CauseCategorySourceOfTruth(cause_category_cache),
            name="cause categories",
        )

    async def _fetch_train(self, key: TrainKey) -> Train | None:
        if key.departure_date is None:
            entities = await self._http_client.fetch_latest_train(key.number, key.version)
        else:
            entities = await self._http_client.fetch_train(
                key.departure_date, key.number, key.version
            )
        if not entities:
            logger.debug(f"No data for train {key.number} since version {key.version}")
            return None
        return train_to_domain(entities[0])

    async def _fetch_station_trains(self, key: StationTrainsKey) -> list[Train]:
        entities = await self._http_client.fetch_trains_by_count(
            key.station_short_code,
            arrived=key.arrived,
            arriving=key.arriving,
            departed=key.departed,
            departing=key.departing,
        )
        trains = trains_to_domain(entities)
        logger.info(f"Fetched {len(trains)} trains for station {key.station_short_code}")
        return trains

    async def _fetch_cause_categories(self, level: int) -> list[CauseCategory]:
        if level == CATEGORY_LEVEL:
            entities = await self._http_client.fetch_cause_categories()
        elif level == DETAILED_CATEGORY_LEVEL:
            entities = await self._http_client.fetch_detailed_cause_categories()  # type: ignore[assignment]
        elif level == THIRD_LEVEL_CATEGORY_LEVEL:
            entities = await self._http_client.fetch_third_level_cause_categories()  # type: ignore[assignment]
        else:
            raise ValueError(f"Invalid cause category level: {level}")
        return [cause_category_to_domain(entity) for entity in entities]

    async def _fresh_train(self, key: TrainKey) -> Train | None:
        try:
            return await self._train_store.fresh(key)
        finally:
            await self._train_store.clear(key)

    async def train(
        self, departure_date: str, number: int, version: int | None = None
    ) -> Train | None:
        return await self._fresh_train(TrainKey(departure_date, number, version))

    async def latest_train(self, number: int, version: int | None = None) -> Train | None:
        return await self._fresh_train(TrainKey(None, number, version))

    async def trains_at_station(self, station_short_code: str) -> list[Train]:
        key = StationTrainsKey(
            station_short_code,
            arrived=self._arrived_trains,
            arriving=self._arriving_trains,
            departed=self._departed_trains,
            departing=self._departing_trains,
        )
        try:
            return await self._station_trains_store.fresh(key) or []
        finally:
            await self._station_trains_store.clear(key)

    async def cause_categories(self) -> list[CauseCategory]:
        return await self._category_store.get(CATEGORY_LEVEL) or []

    async def detailed_cause_categories(self) -> list[CauseCategory]:
        return await self._category_store.get(DETAILED_CATEGORY_LEVEL) or []

    async def third_level_cause_categories(self) -> list[CauseCategory]:
        return await self._category_store.get(THIRD_LEVEL_CATEGORY_LEVEL) or []

    async def all_cause_categories(self) -> CauseCategories:
        categories, detailed, third_level = await asyncio.gather(
            self.cause_categories(),
            self.detailed_cause_categories(),
            self.third_level_cause_categories(),
        )
        return CauseCategories(
            categories=tuple(categories),
            detailed_categories=tuple(detailed),
            third_level_categories=tuple(third_level),
        )
