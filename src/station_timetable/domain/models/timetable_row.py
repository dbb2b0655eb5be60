"""Timetable row domain model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from station_timetable.domain.models.delay_cause import DelayCause


class TimetableRowType(Enum):
    """Timetable row type."""

    ARRIVAL = "Arrival"
    DEPARTURE = "Departure"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TimetableRow:
    """A single scheduled arrival or departure of a train at a station.

    Attributes:
        type: Either arrival or departure.
        station_code: The UIC code of the station.
        scheduled_time: Scheduled time of the arrival or departure.
        track: Track number.
        estimated_time: Live estimate for the arrival or departure.
        actual_time: Actual time of the arrival or departure.
        difference_in_minutes: Difference between scheduled and actual time.
        train_stopping: Whether the train stops at the station.
        commercial_stop: Whether the stop is commercial, or None if the train is not stopping.
        cancelled: Whether the arrival or departure is cancelled.
        marked_ready: Whether the train is marked ready to depart (origin station only).
        causes: Causes for the train being behind or ahead of schedule.
    """

    type: TimetableRowType
    station_code: int
    scheduled_time: datetime
    track: str | None = None
    estimated_time: datetime | None = None
    actual_time: datetime | None = None
    difference_in_minutes: int = 0
    train_stopping: bool = True
    commercial_stop: bool | None = None
    cancelled: bool = False
    marked_ready: bool = False
    causes: tuple[DelayCause, ...] = ()


def arrival(
    station_code: int,
    track: str | None,
    scheduled_time: datetime,
    estimated_time: datetime | None = None,
    actual_time: datetime | None = None,
    difference_in_minutes: int = 0,
    train_stopping: bool = True,
    commercial_stop: bool | None = True,
    causes: tuple[DelayCause, ...] = (),
    cancelled: bool = False,
) -> TimetableRow:
    """Create an arrival row of a commercial stop."""
    return TimetableRow(
        type=TimetableRowType.ARRIVAL,
        station_code=station_code,
        scheduled_time=scheduled_time,
        track=track,
        estimated_time=estimated_time,
        actual_time=actual_time,
        difference_in_minutes=difference_in_minutes,
        train_stopping=train_stopping,
        commercial_stop=commercial_stop,
        cancelled=cancelled,
        causes=causes,
    )


def departure(
    station_code: int,
    track: str | None,
    scheduled_time: datetime,
    estimated_time: datetime | None = None,
    actual_time: datetime | None = None,
    difference_in_minutes: int = 0,
    marked_ready: bool = False,
    train_stopping: bool = True,
    commercial_stop: bool | None = True,
    causes: tuple[DelayCause, ...] = (),
    cancelled: bool = False,
) -> TimetableRow:
    """Create a departure row of a commercial stop."""
    return TimetableRow(
        type=TimetableRowType.DEPARTURE,
        station_code=station_code,
        scheduled_time=scheduled_time,
        track=track,
        estimated_time=estimated_time,
        actual_time=actual_time,
        difference_in_minutes=difference_in_minutes,
        train_stopping=train_stopping,
        commercial_stop=commercial_stop,
        cancelled=cancelled,
        marked_ready=marked_ready,
        causes=causes,
    )
