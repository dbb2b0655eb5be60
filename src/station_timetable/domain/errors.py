"""Errors raised by repositories and data mapping."""


class StationTimetableError(Exception):
    """Base class for recoverable data access errors."""


class MappingError(StationTimetableError):
    """Network data could not be mapped into the domain model."""


class NetworkError(StationTimetableError):
    """The timetable service responded with an unexpected status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StationNotFoundError(StationTimetableError):
    """No station matches the requested station code."""

    def __init__(self, station_code: int) -> None:
        super().__init__(f"Station {station_code} not found")
        self.station_code = station_code


class TrainNotFoundError(StationTimetableError):
    """No train matches the requested departure date and number."""

    def __init__(self, number: int, departure_date: str | None = None) -> None:
        suffix = f" on {departure_date}" if departure_date else ""
        super().__init__(f"Train {number}{suffix} not found")
        self.number = number
        self.departure_date = departure_date
