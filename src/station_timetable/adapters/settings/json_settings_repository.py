"""Settings repository that stores the settings in a JSON file."""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from station_timetable.domain.models import TimetableRowType, TrainCategory
from station_timetable.domain.ports.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)

MAX_RECENT_STATIONS = 3

_STATION_KEY = "station"
_RECENT_STATIONS_KEY = "recent_stations"
_TRAIN_CATEGORIES_KEY = "train_categories"
_TIMETABLE_TYPES_KEY = "timetable_types"


class JsonSettingsRepository(SettingsRepository):
    """Adapter for the settings repository using a JSON file.

    Every change rewrites the whole file through a temporary file, so a crash never
    leaves a partially written file behind. Unknown category and type names in the
    file are ignored.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable settings file {self._path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(temp_path, self._path)
        except BaseException:
            Path(temp_path).unlink(missing_ok=True)
            raise

    async def _read(self) -> dict[str, Any]:
        async with self._lock:
            return await asyncio.to_thread(self._load)

    async def station(self) -> int | None:
        station = (await self._read()).get(_STATION_KEY)
        return station if isinstance(station, int) else None

    async def set_station(self, station_code: int) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._load)
            recent = [code for code in data.get(_RECENT_STATIONS_KEY, []) if code != station_code]
            data[_STATION_KEY] = station_code
            data[_RECENT_STATIONS_KEY] = [station_code, *recent][:MAX_RECENT_STATIONS]
            await asyncio.to_thread(self._save, data)
        logger.debug(f"Selected station {station_code}")

    async def recent_stations(self) -> list[int]:
        recent = (await self._read()).get(_RECENT_STATIONS_KEY, [])
        return [code for code in recent if isinstance(code, int)]

    async def train_categories(self) -> set[TrainCategory] | None:
        names = (await self._read()).get(_TRAIN_CATEGORIES_KEY)
        if names is None:
            return None
        return {category for category in TrainCategory if category.name in names}

    async def set_train_categories(self, categories: set[TrainCategory]) -> None:
        await self._update(_TRAIN_CATEGORIES_KEY, sorted(category.name for category in categories))

    async def timetable_types(self) -> set[TimetableRowType] | None:
        names = (await self._read()).get(_TIMETABLE_TYPES_KEY)
        if names is None:
            return None
        return {row_type for row_type in TimetableRowType if row_type.name in names}

    async def set_timetable_types(self, types: set[TimetableRowType]) -> None:
        await self._update(_TIMETABLE_TYPES_KEY, sorted(row_type.name for row_type in types))

    async def _update(self, key: str, value: Any) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._load)
            data[key] = value
            await asyncio.to_thread(self._save, data)
