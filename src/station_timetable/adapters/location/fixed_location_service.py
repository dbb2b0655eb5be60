"""Location service reporting a location given up front."""

from station_timetable.domain.models import Location
from station_timetable.domain.ports.location_service import LocationService


class FixedLocationService(LocationService):
    """Adapter for the location service that always reports the same location."""

    def __init__(self, latitude: float, longitude: float) -> None:
        self._location = Location(latitude=latitude, longitude=longitude)

    async def current_location(self) -> Location:
        return self._location
