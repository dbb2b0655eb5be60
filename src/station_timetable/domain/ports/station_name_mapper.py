"""Station name mapper port."""

from dataclasses import replace
from typing import Protocol

from station_timetable.domain.models.station import Station


class StationNameMapper(Protocol):
    """Maps station UIC codes to station names."""

    def station_name(self, station_code: int) -> str | None:
        """Return the name of the station, or None if the station is not known."""
        ...


def rename(mapper: StationNameMapper, stations: list[Station]) -> list[Station]:
    """Rename the given stations using the mapper."""
    renamed = []
    for station in stations:
        name = mapper.station_name(station.code)
        renamed.append(replace(station, name=name) if name is not None else station)
    return renamed


def rename_and_sort(mapper: StationNameMapper, stations: list[Station]) -> list[Station]:
    """Rename the given stations and sort them alphabetically by name."""
    return sorted(rename(mapper, stations), key=lambda station: station.name)
