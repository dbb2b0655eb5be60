"""Tests for the JSON settings repository."""

import json
from pathlib import Path

import pytest

from station_timetable.adapters.settings import JsonSettingsRepository
from station_timetable.domain.models import TimetableRowType, TrainCategory


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings" / "settings.json"


@pytest.mark.asyncio
async def test_empty_settings(settings_path: Path) -> None:
    """Given no settings file, when reading settings, then nothing is selected."""
    repository = JsonSettingsRepository(settings_path)

    assert await repository.station() is None
    assert await repository.recent_stations() == []
    assert await repository.train_categories() is None
    assert await repository.timetable_types() is None


@pytest.mark.asyncio
async def test_selected_station_is_persisted(settings_path: Path) -> None:
    """Given a selected station, when reading with a new repository, then it is remembered."""
    await JsonSettingsRepository(settings_path).set_station(160)

    repository = JsonSettingsRepository(settings_path)

    assert await repository.station() == 160
    assert await repository.recent_stations() == [160]


@pytest.mark.asyncio
async def test_recent_stations_keep_three_most_recent_first(settings_path: Path) -> None:
    """Given several selections, when reading recent stations, then three most recent are kept."""
    repository = JsonSettingsRepository(settings_path)
    for code in (1, 10, 160, 10, 370):
        await repository.set_station(code)

    assert await repository.station() == 370
    assert await repository.recent_stations() == [370, 10, 160]


@pytest.mark.asyncio
async def test_train_categories_and_timetable_types(settings_path: Path) -> None:
    """Given selected categories and types, when reading them back, then the sets match."""
    repository = JsonSettingsRepository(settings_path)

    await repository.set_train_categories({TrainCategory.COMMUTER})
    await repository.set_timetable_types({TimetableRowType.ARRIVAL, TimetableRowType.DEPARTURE})

    assert await repository.train_categories() == {TrainCategory.COMMUTER}
    assert await repository.timetable_types() == {
        TimetableRowType.ARRIVAL,
        TimetableRowType.DEPARTURE,
    }
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["train_categories"] == ["COMMUTER"]
    assert stored["timetable_types"] == ["ARRIVAL", "DEPARTURE"]


@pytest.mark.asyncio
async def test_empty_selection_is_not_the_same_as_no_selection(settings_path: Path) -> None:
    """Given an empty category selection, when reading it back, then an empty set is returned."""
    repository = JsonSettingsRepository(settings_path)

    await repository.set_train_categories(set())

    assert await repository.train_categories() == set()


@pytest.mark.asyncio
async def test_unreadable_file_is_ignored(settings_path: Path) -> None:
    """Given a corrupt settings file, when reading and writing, then it is replaced."""
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text("{not json", encoding="utf-8")
    repository = JsonSettingsRepository(settings_path)

    assert await repository.station() is None

    await repository.set_station(1)

    assert await repository.station() == 1
    assert list(settings_path.parent.iterdir()) == [settings_path]


@pytest.mark.asyncio
async def test_unknown_names_in_file_are_ignored(settings_path: Path) -> None:
    """Given unknown category names in the file, when reading, then they are skipped."""
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(
        json.dumps({"train_categories": ["COMMUTER", "CARGO"]}), encoding="utf-8"
    )

    repository = JsonSettingsRepository(settings_path)

    assert await repository.train_categories() == {TrainCategory.COMMUTER}
