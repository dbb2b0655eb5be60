"""HTTP client for Digitraffic railway API requests."""

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import aiohttp
from pydantic import BaseModel, TypeAdapter, ValidationError

from station_timetable.adapters.digitraffic_api.constants import (
    CAUSE_CATEGORIES_PATH,
    DEFAULT_HEADERS,
    DETAILED_CAUSE_CATEGORIES_PATH,
    DIGITRAFFIC_BASE_URL,
    LATEST_TRAIN_PATH,
    LIVE_TRAINS_PATH,
    STATIONS_PATH,
    THIRD_LEVEL_CAUSE_CATEGORIES_PATH,
    TRAIN_CATEGORIES,
    TRAIN_PATH,
    USER_HEADER,
)
from station_timetable.adapters.digitraffic_api.network_entities import (
    CauseCategoryNetworkEntity,
    DetailedCauseCategoryNetworkEntity,
    StationNetworkEntity,
    ThirdLevelCauseCategoryNetworkEntity,
    TrainNetworkEntity,
)
from station_timetable.domain.errors import MappingError, NetworkError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse

EntityT = TypeVar("EntityT", bound=BaseModel)


class DigitrafficHttpClient:
    """HTTP client for the Digitraffic railway API.

    Every method returns validated wire models. A response status other than 200
    raises NetworkError and a payload that does not match the wire models raises
    MappingError.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str = DIGITRAFFIC_BASE_URL,
        user_agent: str | None = None,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Base URL of the API, without a trailing slash.
            user_agent: Value of the Digitraffic-User header.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._headers = dict(DEFAULT_HEADERS)
        if user_agent:
            self._headers[USER_HEADER] = user_agent

    async def _handle_response(self, response: "ClientResponse", url: str) -> Any:
        if response.status != 200:
            response_text = await response.text()
            logger.error(
                f"Digitraffic API returned status {response.status} for {url}: "
                f"{response_text[:200]}"
            )
            raise NetworkError(
                f"Digitraffic API returned status {response.status}", status_code=response.status
            )
        return await response.json()

    async def _get(self, path: str, params: dict[str, str | int] | None = None) -> Any:
        url = f"{self._base_url}/{path}"
        logger.debug(f"GET {url} params={params}")
        try:
            async with self._session.get(url, params=params, headers=self._headers) as response:
                return await self._handle_response(response, url)
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"Error requesting {url}: {e}")
            raise NetworkError(f"Failed to reach Digitraffic API: {e}") from e

    async def _get_list(
        self,
        entity_type: type[EntityT],
        path: str,
        params: dict[str, str | int] | None = None,
    ) -> list[EntityT]:
        data = await self._get(path, params)
        try:
            return TypeAdapter(list[entity_type]).validate_python(data)  # type: ignore[valid-type]
        except ValidationError as e:
            logger.error(f"Unexpected {entity_type.__name__} payload from {path}: {e}")
            raise MappingError(f"Unexpected payload from {path}") from e

    async def fetch_stations(self) -> list[StationNetworkEntity]:
        """Fetch the metadata of all stations."""
        return await self._get_list(StationNetworkEntity, STATIONS_PATH)

    async def fetch_train(
        self, departure_date: str, number: int, version: int | None = None
    ) -> list[TrainNetworkEntity]:
        """Fetch a train by departure date and number.

        Returns an empty list if the train is not found or has not changed since the
        given version.
        """
        params: dict[str, str | int] | None = {"version": version} if version is not None else None
        path = TRAIN_PATH.format(departure_date=departure_date, number=number)
        return await self._get_list(TrainNetworkEntity, path, params)

    async def fetch_latest_train(
        self, number: int, version: int | None = None
    ) -> list[TrainNetworkEntity]:
        """Fetch the latest train with the given number."""
        params: dict[str, str | int] | None = {"version": version} if version is not None else None
        path = LATEST_TRAIN_PATH.format(number=number)
        return await self._get_list(TrainNetworkEntity, path, params)

    async def fetch_trains_by_count(
        self,
        station_short_code: str,
        arrived: int = 5,
        arriving: int = 20,
        departed: int = 5,
        departing: int = 20,
        train_categories: str = TRAIN_CATEGORIES,
    ) -> list[TrainNetworkEntity]:
        """Fetch the trains calling at a station.

        Args:
            station_short_code: Short code of the station, e.g. "HKI".
            arrived: Number of already arrived trains.
            arriving: Number of arriving trains.
            departed: Number of already departed trains.
            departing: Number of departing trains.
            train_categories: Comma separated train categories.
        """
        params: dict[str, str | int] = {
            "arrived_trains": arrived,
            "arriving_trains": arriving,
            "departed_trains": departed,
            "departing_trains": departing,
            "train_categories": train_categories,
        }
        path = LIVE_TRAINS_PATH.format(station_short_code=station_short_code)
        return await self._get_list(TrainNetworkEntity, path, params)

    async def fetch_cause_categories(self) -> list[CauseCategoryNetworkEntity]:
        return await self._get_list(CauseCategoryNetworkEntity, CAUSE_CATEGORIES_PATH)

    async def fetch_detailed_cause_categories(self) -> list[DetailedCauseCategoryNetworkEntity]:
        return await self._get_list(
            DetailedCauseCategoryNetworkEntity, DETAILED_CAUSE_CATEGORIES_PATH
        )

    async def fetch_third_level_cause_categories(
        self,
    ) -> list[ThirdLevelCauseCategoryNetworkEntity]:
        return await self._get_list(
            ThirdLevelCauseCategoryNetworkEntity, THIRD_LEVEL_CAUSE_CATEGORIES_PATH
        )
