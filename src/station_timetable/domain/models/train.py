"""Train domain model."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from station_timetable.domain.models.timetable_row import TimetableRow


class TrainCategory(Enum):
    """Train category."""

    LONG_DISTANCE = "Long-distance"
    COMMUTER = "Commuter"

    @classmethod
    def of(cls, value: str) -> "TrainCategory":
        """Return the category matching the given wire value, ignoring case."""
        for category in cls:
            if category.value.lower() == value.lower():
                return category
        raise ValueError(f"Unknown category: {value}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Train:
    """Represents a train and its timetable.

    The timetable is ordered by time and is the single source from which the train's
    stops are derived.
    """

    number: int
    type: str
    category: TrainCategory
    commuter_line_id: str | None = None
    is_running: bool = True
    is_cancelled: bool = False
    departure_date: date = field(default_factory=date.today)
    version: int = 0
    timetable: tuple[TimetableRow, ...] = ()

    @property
    def departure_date_string(self) -> str:
        """Departure date in ISO format."""
        return self.departure_date.isoformat()

    def is_long_distance_train(self) -> bool:
        return self.category is TrainCategory.LONG_DISTANCE

    def is_commuter_train(self) -> bool:
        return self.category is TrainCategory.COMMUTER

    def origin(self) -> int | None:
        """Return the UIC code of the train's origin station."""
        return self.timetable[0].station_code if self.timetable else None

    def destination(self) -> int | None:
        """Return the UIC code of the train's destination station."""
        return self.timetable[-1].station_code if self.timetable else None

    def track(self, station_code: int) -> str | None:
        """Return the track for the given station."""
        for row in self.timetable:
            if row.station_code == station_code:
                return row.track
        return None

    def is_ready(self) -> bool:
        """Check whether the train is marked ready on its origin station."""
        return bool(self.timetable) and self.timetable[0].marked_ready

    def is_not_ready(self) -> bool:
        return not self.is_ready()

    def has_reached_destination(self) -> bool:
        return bool(self.timetable) and self.timetable[-1].actual_time is not None

    def is_origin(self, station_code: int) -> bool:
        return self.origin() == station_code

    def is_destination(self, station_code: int) -> bool:
        return self.destination() == station_code

    def __str__(self) -> str:
        return f"Train(number={self.number}, type={self.type}, category={self.category}, ...)"
