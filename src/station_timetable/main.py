"""Main entry point for the station timetable application."""

import asyncio
import logging
import sys
from dataclasses import dataclass

import aiohttp

from station_timetable.adapters.cache import CauseCategoryCache, StationCache, create_database
from station_timetable.adapters.config import AppConfig
from station_timetable.adapters.digitraffic_api import DigitrafficHttpClient
from station_timetable.adapters.repositories import (
    StoreBackedStationRepository,
    StoreBackedTrainRepository,
)
from station_timetable.adapters.settings import JsonSettingsRepository
from station_timetable.application.controllers import (
    HomeController,
    StationsController,
    TimetableController,
    TrainDetailsController,
)
from station_timetable.application.controllers.timetable import TimetableEvent
from station_timetable.domain.ports import LocationService

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@dataclass
class Application:
    """Repositories shared by all controllers of one application instance."""

    config: AppConfig
    station_repository: StoreBackedStationRepository
    train_repository: StoreBackedTrainRepository
    settings_repository: JsonSettingsRepository
    location_service: LocationService | None = None

    def home_controller(self) -> HomeController:
        return HomeController(
            self.settings_repository,
            self.station_repository,
            skip_home_screen=self.config.skip_home_screen,
        )

    def stations_controller(self) -> StationsController:
        return StationsController(
            self.station_repository, self.settings_repository, self.location_service
        )

    def timetable_controller(self) -> TimetableController:
        return TimetableController(
            self.train_repository, self.station_repository, self.settings_repository
        )

    def train_details_controller(self) -> TrainDetailsController:
        return TrainDetailsController(self.train_repository, self.station_repository)


def create_application(
    config: AppConfig,
    session: aiohttp.ClientSession,
    location_service: LocationService | None = None,
) -> Application:
    """Wire the adapters together."""
    session_factory = create_database(config.database_url)
    http_client = DigitrafficHttpClient(
        session, base_url=config.api_base_url, user_agent=config.user_agent
    )
    station_repository = StoreBackedStationRepository(
        http_client,
        StationCache(session_factory),
        locale=config.locale,
        allowed_station_codes=set(config.allowed_station_codes),
        country_code=config.station_country_code,
    )
    train_repository = StoreBackedTrainRepository(
        http_client,
        CauseCategoryCache(session_factory),
        arrived_trains=config.arrived_trains,
        arriving_trains=config.arriving_trains,
        departed_trains=config.departed_trains,
        departing_trains=config.departing_trains,
    )
    return Application(
        config=config,
        station_repository=station_repository,
        train_repository=train_repository,
        settings_repository=JsonSettingsRepository(config.settings_file),
        location_service=location_service,
    )


def create_session(config: AppConfig) -> aiohttp.ClientSession:
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=config.api_timeout_seconds))


async def main() -> None:
    """Open the timetable of the most recently selected station."""
    config = AppConfig()
    configure_logging(config.log_level)

    async with create_session(config) as session:
        app = create_application(config, session)

        home = app.home_controller()
        await home.start()
        await home.idle()
        await home.stop()

        station = home.state.value.station
        if station is None:
            logger.error("No station selected. Select one with 'station-timetable stations'.")
            sys.exit(1)

        timetable = app.timetable_controller()
        await timetable.start()
        timetable.offer(TimetableEvent.LoadTimetable(station.code))
        try:
            await timetable.idle()
            state = timetable.state.value
            logger.info(f"Loaded {len(state.timetable)} trains at {station.name}")
        finally:
            await timetable.stop()


if __name__ == "__main__":
    asyncio.run(main())
