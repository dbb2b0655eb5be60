"""Events of the station list."""

from dataclasses import dataclass

from station_timetable.domain.models import Station


class StationsEvent:
    """Events accepted by the stations controller."""

    @dataclass(frozen=True)
    class LoadStations:
        pass

    @dataclass(frozen=True)
    class ReloadStations:
        pass

    @dataclass(frozen=True)
    class SelectNearestStation:
        pass

    @dataclass(frozen=True)
    class ShowStationList:
        pass

    @dataclass(frozen=True)
    class StationSelected:
        station: Station


AnyStationsEvent = (
    StationsEvent.LoadStations
    | StationsEvent.ReloadStations
    | StationsEvent.SelectNearestStation
    | StationsEvent.ShowStationList
    | StationsEvent.StationSelected
)
