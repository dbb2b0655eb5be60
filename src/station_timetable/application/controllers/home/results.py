"""Results of home operations."""

from dataclasses import dataclass

from station_timetable.domain.models import Station


class LoadSettings:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        pass

    @dataclass(frozen=True)
    class Error:
        message: str | None


class LoadStation:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        station: Station | None

    @dataclass(frozen=True)
    class Error:
        message: str | None


HomeResult = (
    LoadSettings.Loading
    | LoadSettings.Success
    | LoadSettings.Error
    | LoadStation.Loading
    | LoadStation.Success
    | LoadStation.Error
)
