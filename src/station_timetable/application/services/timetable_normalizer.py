"""Derives station-level stops from a train's raw timetable rows."""

from datetime import datetime

from station_timetable.domain.models import Stop, TimetableRowType, Train


def stops(train: Train) -> list[Stop]:
    """Return all of the train's stops in timetable order.

    The first row forms the origin if it is a departure and the last row forms the
    destination if it is an arrival. Interior rows are paired two at a time; a pair
    forms a waypoint only when it is an arrival followed by a departure at the same
    station. Other pairs (technical stops, malformed data) are dropped.
    """
    timetable = train.timetable
    result: list[Stop] = []

    if timetable and timetable[0].type is TimetableRowType.DEPARTURE:
        result.append(Stop(departure=timetable[0]))

    interior = timetable[1:-1]
    for index in range(0, len(interior) - 1, 2):
        first, last = interior[index], interior[index + 1]
        if (
            first.type is TimetableRowType.ARRIVAL
            and last.type is TimetableRowType.DEPARTURE
            and first.station_code == last.station_code
        ):
            result.append(Stop(arrival=first, departure=last))

    if timetable and timetable[-1].type is TimetableRowType.ARRIVAL:
        result.append(Stop(arrival=timetable[-1]))

    return result


def _is_commercial(stop: Stop) -> bool:
    return any(
        row is not None and row.train_stopping and row.commercial_stop is True
        for row in (stop.arrival, stop.departure)
    )


def commercial_stops(train: Train) -> list[Stop]:
    """Return the stops where the train takes on or discharges passengers."""
    return [stop for stop in stops(train) if _is_commercial(stop)]


def current_commercial_stop(train: Train) -> Stop | None:
    """Return the train's current commercial stop, or None if it has not started."""
    for stop in reversed(commercial_stops(train)):
        arrival, departure = stop.arrival, stop.departure
        if (
            (arrival is not None and arrival.actual_time is not None)
            or (departure is not None and departure.actual_time is not None)
            or (departure is not None and departure.marked_ready)
        ):
            return stop
    return None


def stops_at(train: Train, station_code: int) -> list[Stop]:
    """Return the train's stops at the given station.

    There are two stops only when the station is both the origin and the destination.
    """
    return [stop for stop in stops(train) if stop.station_code() == station_code]


def _time_of_selected_type(stop: Stop, types: set[TimetableRowType]) -> datetime | None:
    if len(types) == 2:
        return stop.time_of_next_event()
    if TimetableRowType.ARRIVAL in types and stop.arrival is not None:
        return stop.arrival.actual_time or stop.arrival.scheduled_time
    if TimetableRowType.DEPARTURE in types and stop.departure is not None:
        return stop.departure.actual_time or stop.departure.scheduled_time
    return None


def timetable_entries(
    trains: list[Train],
    station_code: int,
    types: set[TimetableRowType],
    cutoff: datetime,
) -> list[tuple[Train, Stop]]:
    """Return the upcoming (train, stop) entries of a station timetable.

    An entry is kept when a selected side of the stop happens after the cutoff or has
    not happened yet. Entries are sorted by the time of the selected stop type.
    """
    entries = [
        (train, stop)
        for train in trains
        for stop in stops_at(train, station_code)
        if (TimetableRowType.ARRIVAL in types and stop.arrival_after(cutoff))
        or (TimetableRowType.DEPARTURE in types and stop.departure_after(cutoff))
    ]
    # Every kept entry has a time for one of the selected types.
    return sorted(entries, key=lambda entry: _time_of_selected_type(entry[1], types))  # type: ignore[arg-type,return-value]
