"""Tests for the station repository and its SQLite cache."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from station_timetable.adapters.cache import StationCache, create_database
from station_timetable.adapters.digitraffic_api.network_entities import StationNetworkEntity
from station_timetable.adapters.repositories import (
    LocalizedStationNames,
    StoreBackedStationRepository,
)
from station_timetable.domain.errors import NetworkError, StationNotFoundError
from station_timetable.domain.models import ResponseOrigin, StoreResponse
from tests.fakes import make_station


def station_entity(
    code: int,
    name: str,
    short_code: str,
    passenger_traffic: bool = True,
    country_code: str = "FI",
    station_type: str = "STATION",
) -> StationNetworkEntity:
    return StationNetworkEntity(
        passenger_traffic=passenger_traffic,
        type=station_type,
        name=name,
        short_code=short_code,
        code=code,
        country_code=country_code,
        longitude=25.0,
        latitude=60.0,
    )


@pytest.fixture
def station_entities() -> list[StationNetworkEntity]:
    return [
        station_entity(1, "Helsinki asema", "HKI"),
        station_entity(10, "Pasila asema", "PSL"),
        station_entity(160, "Tampere asema", "TPE"),
        station_entity(769, "Kempele", "KEM", passenger_traffic=False),
        station_entity(700, "Tavaraterminaali", "TAV", passenger_traffic=False),
        station_entity(2000, "Moskva", "MVA", country_code="RU"),
        station_entity(2100, "Vaihde", "VAI", station_type="TURNOUT_IN_THE_OPEN_LINE"),
    ]


@pytest.fixture
def cache() -> StationCache:
    return StationCache(create_database("sqlite://"))


@pytest.fixture
def http_client(station_entities: list[StationNetworkEntity]) -> MagicMock:
    client = MagicMock()
    client.fetch_stations = AsyncMock(return_value=station_entities)
    return client


@pytest.mark.asyncio
async def test_fetch_keeps_finnish_passenger_stations_and_allowed_exceptions(
    http_client: MagicMock, cache: StationCache
) -> None:
    """Given mixed station metadata, when fetching, then only listed stations are kept."""
    repository = StoreBackedStationRepository(http_client, cache)

    responses = [response async for response in repository.fetch_stations()]

    assert responses[0] == StoreResponse.Loading()
    data = responses[-1]
    assert isinstance(data, StoreResponse.Data)
    assert data.origin is ResponseOrigin.FETCHER
    assert sorted(station.code for station in data.value) == [1, 10, 160, 769]


@pytest.mark.asyncio
async def test_second_stream_serves_cache_then_no_new_data(
    http_client: MagicMock, cache: StationCache
) -> None:
    """Given a filled cache, when streaming again with unchanged data, then NoNewData follows the cache."""
    repository = StoreBackedStationRepository(http_client, cache)
    _ = [response async for response in repository.fetch_stations()]

    responses = [response async for response in repository.fetch_stations()]

    assert isinstance(responses[0], StoreResponse.Data)
    assert responses[0].origin is ResponseOrigin.CACHE
    assert [station.name for station in responses[0].value] == [
        "Helsinki asema",
        "Kempele",
        "Pasila asema",
        "Tampere asema",
    ]
    assert responses[1:] == [StoreResponse.Loading(), StoreResponse.NoNewData()]


@pytest.mark.asyncio
async def test_failed_refresh_reports_error_and_keeps_cache(
    http_client: MagicMock, cache: StationCache
) -> None:
    """Given a cached list, when the refresh fails, then Error follows and the cache is kept."""
    repository = StoreBackedStationRepository(http_client, cache)
    _ = [response async for response in repository.fetch_stations()]
    http_client.fetch_stations.side_effect = NetworkError("status 503", status_code=503)

    responses = [response async for response in repository.fetch_stations()]

    assert responses[-1] == StoreResponse.Error("status 503")
    assert len(await cache.read_all()) == 4


@pytest.mark.asyncio
async def test_fetch_station_from_cache(http_client: MagicMock, cache: StationCache) -> None:
    """Given a cached station, when fetching it, then the network is not used."""
    await cache.replace_all([make_station(160, "Tampere asema", "TPE")])
    repository = StoreBackedStationRepository(http_client, cache)

    station = await repository.fetch_station(160)

    assert station.short_code == "TPE"
    http_client.fetch_stations.assert_not_awaited()


@pytest.mark.asyncio
async def test_fetch_station_fetches_when_not_cached(
    http_client: MagicMock, cache: StationCache
) -> None:
    """Given an empty cache, when fetching a station, then the station list is fetched."""
    repository = StoreBackedStationRepository(http_client, cache)

    station = await repository.fetch_station(10)

    assert station.name == "Pasila asema"
    assert len(await cache.read_all()) == 4


@pytest.mark.asyncio
async def test_fetch_unknown_station_raises(http_client: MagicMock, cache: StationCache) -> None:
    """Given a code not in the station list, when fetching it, then StationNotFoundError is raised."""
    repository = StoreBackedStationRepository(http_client, cache)

    with pytest.raises(StationNotFoundError, match="Station 700 not found"):
        await repository.fetch_station(700)


@pytest.mark.asyncio
async def test_fetch_station_rejects_invalid_code(
    http_client: MagicMock, cache: StationCache
) -> None:
    """Given a non-positive code, when fetching it, then ValueError is raised."""
    repository = StoreBackedStationRepository(http_client, cache)

    with pytest.raises(ValueError, match="must be positive"):
        await repository.fetch_station(0)


@pytest.mark.asyncio
async def test_name_mapper_is_built_once_with_localized_names(
    http_client: MagicMock, cache: StationCache
) -> None:
    """Given concurrent callers, when getting the name mapper, then stations are fetched once."""
    repository = StoreBackedStationRepository(http_client, cache, locale="sv")

    mappers = await asyncio.gather(*(repository.get_station_name_mapper() for _ in range(3)))

    assert mappers[0] is mappers[1] is mappers[2]
    assert mappers[0].station_name(1) == "Helsingfors"
    assert mappers[0].station_name(769) == "Kempele"
    assert mappers[0].station_name(2000) is None
    assert http_client.fetch_stations.await_count == 1


def test_localized_names_prefer_explicit_overrides() -> None:
    """Given explicit names, when building the mapping, then they override the built-in names."""
    stations = [make_station(1, "Helsinki asema"), make_station(20, "Kerava asema")]

    names = LocalizedStationNames.from_stations(stations, "fi", {20: "Kerava (Kervo)"})

    assert names.station_name(1) == "Helsinki"
    assert names.station_name(20) == "Kerava (Kervo)"
    assert len(names) == 2


def test_localized_names_without_locale_use_station_names() -> None:
    """Given no locale, when building the mapping, then the stations' own names are used."""
    names = LocalizedStationNames.from_stations([make_station(1, "Helsinki asema")])

    assert names.station_name(1) == "Helsinki asema"
