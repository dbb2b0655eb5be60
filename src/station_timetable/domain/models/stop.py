"""Stop domain model."""

from dataclasses import dataclass
from datetime import datetime

from station_timetable.domain.models.timetable_row import TimetableRow, TimetableRowType


@dataclass(frozen=True)
class Stop:
    """A train's visit at a station.

    The stop consists of a timetable row for the train's arrival, its departure, or both.
    A stop with only a departure is the train's origin and a stop with only an arrival
    is its destination.
    """

    arrival: TimetableRow | None = None
    departure: TimetableRow | None = None

    def __post_init__(self) -> None:
        if self.arrival is None and self.departure is None:
            raise ValueError("Stop requires an arrival, a departure, or both")
        if self.arrival is not None and self.arrival.type is not TimetableRowType.ARRIVAL:
            raise ValueError(f"Stop arrival has type {self.arrival.type}")
        if self.departure is not None and self.departure.type is not TimetableRowType.DEPARTURE:
            raise ValueError(f"Stop departure has type {self.departure.type}")
        if (
            self.arrival is not None
            and self.departure is not None
            and self.arrival.station_code != self.departure.station_code
        ):
            raise ValueError(
                f"Stop arrival and departure are at different stations: "
                f"{self.arrival.station_code} != {self.departure.station_code}"
            )

    def is_origin(self) -> bool:
        """Check whether the stop is the train's origin."""
        return self.arrival is None

    def is_destination(self) -> bool:
        """Check whether the stop is the train's destination."""
        return self.departure is None

    def is_waypoint(self) -> bool:
        """Check whether the stop is a waypoint."""
        return self.arrival is not None and self.departure is not None

    def station_code(self) -> int:
        if self.arrival is not None:
            return self.arrival.station_code
        assert self.departure is not None
        return self.departure.station_code

    def track(self) -> str | None:
        if self.arrival is not None and self.arrival.track is not None:
            return self.arrival.track
        return self.departure.track if self.departure is not None else None

    def is_reached(self) -> bool:
        return self.arrival is None or self.arrival.actual_time is not None

    def is_not_reached(self) -> bool:
        return self.arrival is not None and self.arrival.actual_time is None

    def is_departed(self) -> bool:
        return self.departure is not None and self.departure.actual_time is not None

    def is_not_departed(self) -> bool:
        return self.departure is not None and self.departure.actual_time is None

    def time_of_next_event(self) -> datetime:
        """Return the time of the next scheduled event on the stop.

        If there are no more scheduled events, returns the time of the most recent one.
        """
        arrival, departure = self.arrival, self.departure
        if departure is not None and departure.actual_time is not None:
            return departure.actual_time
        if departure is not None and (arrival is None or arrival.actual_time is not None):
            return departure.scheduled_time
        if arrival is not None and arrival.actual_time is not None:
            return arrival.actual_time
        if arrival is not None:
            return arrival.scheduled_time
        raise RuntimeError("Stop has neither arrival nor departure")

    def arrival_after(self, time: datetime) -> bool:
        """Check whether the train has not yet arrived, or arrived after the given time."""
        if self.arrival is None:
            return False
        return self.arrival.actual_time is None or self.arrival.actual_time > time

    def departure_after(self, time: datetime) -> bool:
        """Check whether the train has not yet departed, or departed after the given time."""
        if self.departure is None:
            return False
        return self.departure.actual_time is None or self.departure.actual_time > time
