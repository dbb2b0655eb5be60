"""Location service port."""

from typing import Protocol

from station_timetable.domain.models.location import Location


class LocationService(Protocol):
    """Port for acquiring the current device location.

    Permission handling belongs to the implementation; a denied permission
    is reported by raising an exception.
    """

    async def current_location(self) -> Location:
        """Get the current location."""
        ...
