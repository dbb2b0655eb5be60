"""SQLite cache of delay cause categories."""

import asyncio
import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from station_timetable.adapters.cache.entities import CauseCategoryCacheEntity
from station_timetable.domain.models import CauseCategory, PassengerFriendlyName

logger = logging.getLogger(__name__)


def _to_entity(category: CauseCategory, level: int) -> CauseCategoryCacheEntity:
    name = category.passenger_friendly_name
    return CauseCategoryCacheEntity(
        id=category.id,
        level=level,
        name=category.name,
        passenger_term_fi=name.fi if name else None,
        passenger_term_en=name.en if name else None,
        passenger_term_sv=name.sv if name else None,
    )


def _to_domain(entity: CauseCategoryCacheEntity) -> CauseCategory:
    passenger_friendly_name = None
    if (
        entity.passenger_term_fi is not None
        and entity.passenger_term_en is not None
        and entity.passenger_term_sv is not None
    ):
        passenger_friendly_name = PassengerFriendlyName(
            fi=entity.passenger_term_fi,
            en=entity.passenger_term_en,
            sv=entity.passenger_term_sv,
        )
    return CauseCategory(
        id=entity.id, name=entity.name, passenger_friendly_name=passenger_friendly_name
    )


class CauseCategoryCache:
    """Stores the delay cause categories of each level in SQLite."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._lock = asyncio.Lock()

    def _read(self, level: int) -> list[CauseCategory]:
        with self._session_factory() as session:
            entities = session.scalars(
                select(CauseCategoryCacheEntity)
                .where(CauseCategoryCacheEntity.level == level)
                .order_by(CauseCategoryCacheEntity.id)
            ).all()
            return [_to_domain(entity) for entity in entities]

    def _replace(self, level: int, categories: list[CauseCategory]) -> None:
        with self._session_factory.begin() as session:
            session.execute(
                delete(CauseCategoryCacheEntity).where(CauseCategoryCacheEntity.level == level)
            )
            session.add_all(_to_entity(category, level) for category in categories)
        logger.debug(f"Stored {len(categories)} cause categories of level {level}")

    async def read(self, level: int) -> list[CauseCategory]:
        """Return the cached categories of the given level ordered by id."""
        async with self._lock:
            return await asyncio.to_thread(self._read, level)

    async def replace(self, level: int, categories: list[CauseCategory]) -> None:
        """Replace the cached categories of the given level in a single transaction."""
        async with self._lock:
            await asyncio.to_thread(self._replace, level, categories)
