"""SQLite cache of station metadata."""

import asyncio
import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from station_timetable.adapters.cache.entities import StationCacheEntity
from station_timetable.domain.models import Station, StationType

logger = logging.getLogger(__name__)


def _to_entity(station: Station) -> StationCacheEntity:
    return StationCacheEntity(
        code=station.code,
        type=station.type.value,
        passenger_traffic=station.passenger_traffic,
        name=station.name,
        short_code=station.short_code,
        country_code=station.country_code,
        longitude=station.longitude,
        latitude=station.latitude,
    )


def _to_domain(entity: StationCacheEntity) -> Station:
    return Station(
        code=entity.code,
        short_code=entity.short_code,
        name=entity.name,
        longitude=entity.longitude,
        latitude=entity.latitude,
        type=StationType.of(entity.type),
        passenger_traffic=entity.passenger_traffic,
        country_code=entity.country_code,
    )


class StationCache:
    """Stores the station list in SQLite.

    Database calls run one at a time in a worker thread so they do not block the
    event loop.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._lock = asyncio.Lock()

    def _read_all(self) -> list[Station]:
        with self._session_factory() as session:
            entities = session.scalars(
                select(StationCacheEntity).order_by(StationCacheEntity.name)
            ).all()
            return [_to_domain(entity) for entity in entities]

    def _read(self, station_code: int) -> Station | None:
        with self._session_factory() as session:
            entity = session.get(StationCacheEntity, station_code)
            return _to_domain(entity) if entity is not None else None

    def _replace_all(self, stations: list[Station]) -> None:
        with self._session_factory.begin() as session:
            session.execute(delete(StationCacheEntity))
            session.add_all(_to_entity(station) for station in stations)
        logger.debug(f"Stored {len(stations)} stations")

    async def read_all(self) -> list[Station]:
        """Return all cached stations sorted by name."""
        async with self._lock:
            return await asyncio.to_thread(self._read_all)

    async def read(self, station_code: int) -> Station | None:
        """Return the cached station with the given code."""
        async with self._lock:
            return await asyncio.to_thread(self._read, station_code)

    async def replace_all(self, stations: list[Station]) -> None:
        """Replace the cached stations in a single transaction."""
        async with self._lock:
            await asyncio.to_thread(self._replace_all, stations)
