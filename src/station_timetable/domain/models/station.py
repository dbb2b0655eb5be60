"""Station domain model."""

from dataclasses import dataclass
from enum import Enum


class StationType(Enum):
    """Type of a railway traffic location."""

    STATION = "STATION"
    STOPPING_POINT = "STOPPING_POINT"
    TURNOUT_IN_THE_OPEN_LINE = "TURNOUT_IN_THE_OPEN_LINE"

    @classmethod
    def of(cls, value: str) -> "StationType":
        """Return the station type matching the given wire value."""
        for station_type in cls:
            if station_type.value == value:
                return station_type
        raise ValueError(f"Unknown station type: '{value}'")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Station:
    """Represents a railway station.

    Attributes:
        code: Country specific UIC code of the station [1-9999].
        short_code: Short station code used by the live trains API.
        name: Station name.
        type: Station type.
        passenger_traffic: Whether the station supports commercial passenger traffic.
        country_code: Country code.
        longitude: Longitude in WGS-84 format.
        latitude: Latitude in WGS-84 format.
    """

    code: int
    short_code: str
    name: str
    longitude: float
    latitude: float
    type: StationType = StationType.STATION
    passenger_traffic: bool = True
    country_code: str = "FI"
