"""Results of station list operations."""

from dataclasses import dataclass

from station_timetable.domain.models import Station
from station_timetable.domain.ports import StationNameMapper


@dataclass(frozen=True)
class RecentStationsUpdated:
    station_codes: tuple[int, ...]


@dataclass(frozen=True)
class RecentStationsFailed:
    """The selected station could not be stored or the recent stations read."""

    message: str | None


class LoadStations:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Reloading:
        pass

    @dataclass(frozen=True)
    class NoNewData:
        pass

    @dataclass(frozen=True)
    class Success:
        stations: tuple[Station, ...]

    @dataclass(frozen=True)
    class Error:
        message: str | None


class LoadNameMapper:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        mapper: StationNameMapper

    @dataclass(frozen=True)
    class Error:
        message: str | None


class FetchLocation:
    """Results of locating the nearest station."""

    @dataclass(frozen=True)
    class Fetching:
        pass

    @dataclass(frozen=True)
    class Success:
        latitude: float
        longitude: float

    @dataclass(frozen=True)
    class Error:
        message: str | None

    @dataclass(frozen=True)
    class Cancel:
        """Return to selecting the station from the list."""


StationsResult = (
    RecentStationsUpdated
    | RecentStationsFailed
    | LoadStations.Loading
    | LoadStations.Reloading
    | LoadStations.NoNewData
    | LoadStations.Success
    | LoadStations.Error
    | LoadNameMapper.Loading
    | LoadNameMapper.Success
    | LoadNameMapper.Error
    | FetchLocation.Fetching
    | FetchLocation.Success
    | FetchLocation.Error
    | FetchLocation.Cancel
)
