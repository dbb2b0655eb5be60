"""Tests for deriving stops and timetable entries from timetable rows."""

from station_timetable.application.services import (
    commercial_stops,
    current_commercial_stop,
    stops,
    stops_at,
    timetable_entries,
)
from station_timetable.domain.models import Stop, TimetableRowType, Train, TrainCategory
from tests.fakes import at, make_train, row

ARRIVAL = TimetableRowType.ARRIVAL
DEPARTURE = TimetableRowType.DEPARTURE
BOTH = {ARRIVAL, DEPARTURE}


def helsinki_to_kerava() -> Train:
    """Train departing Helsinki, stopping at Pasila and arriving at Kerava."""
    return make_train(
        27,
        [
            row(DEPARTURE, 1, at(12, 0)),
            row(ARRIVAL, 10, at(12, 5), actual_time=at(12, 12)),
            row(DEPARTURE, 10, at(12, 15), actual_time=at(12, 15)),
            row(ARRIVAL, 18, at(12, 30)),
        ],
    )


def test_stops_pairs_origin_waypoint_and_destination() -> None:
    """Given departure, arrival/departure pair and arrival, when deriving stops, then three stops result."""
    result = stops(helsinki_to_kerava())

    assert len(result) == 3
    origin, waypoint, destination = result
    assert origin.is_origin() and origin.station_code() == 1
    assert waypoint.is_waypoint() and waypoint.station_code() == 10
    assert waypoint.is_reached() and waypoint.is_departed()
    assert destination.is_destination() and destination.station_code() == 18


def test_stops_of_empty_timetable() -> None:
    """Given no rows, when deriving stops, then there are none."""
    assert stops(make_train(1, [])) == []


def test_stops_of_single_departure() -> None:
    """Given only a departure, when deriving stops, then only the origin results."""
    result = stops(make_train(1, [row(DEPARTURE, 1, at(10))]))

    assert result == [Stop(departure=row(DEPARTURE, 1, at(10)))]


def test_stops_drops_pair_at_different_stations() -> None:
    """Given an interior pair at two stations, when deriving stops, then the pair is dropped."""
    train = make_train(
        1,
        [
            row(DEPARTURE, 1, at(10)),
            row(ARRIVAL, 10, at(10, 5)),
            row(DEPARTURE, 11, at(10, 6)),
            row(ARRIVAL, 18, at(10, 30)),
        ],
    )

    assert [stop.station_code() for stop in stops(train)] == [1, 18]


def test_stops_drops_reversed_pair() -> None:
    """Given a departure before the arrival of a pair, when deriving stops, then it is dropped."""
    train = make_train(
        1,
        [
            row(DEPARTURE, 1, at(10)),
            row(DEPARTURE, 10, at(10, 5)),
            row(ARRIVAL, 10, at(10, 6)),
            row(ARRIVAL, 18, at(10, 30)),
        ],
    )

    assert [stop.station_code() for stop in stops(train)] == [1, 18]


def test_stops_windows_do_not_overlap() -> None:
    """Given two consecutive waypoints, when deriving stops, then each pair forms one stop."""
    train = make_train(
        1,
        [
            row(DEPARTURE, 1, at(10)),
            row(ARRIVAL, 10, at(10, 5)),
            row(DEPARTURE, 10, at(10, 6)),
            row(ARRIVAL, 18, at(10, 15)),
            row(DEPARTURE, 18, at(10, 16)),
            row(ARRIVAL, 20, at(10, 30)),
        ],
    )

    result = stops(train)

    assert [stop.station_code() for stop in result] == [1, 10, 18, 20]
    assert all(stop.is_waypoint() for stop in result[1:3])


def test_stops_keeps_origin_and_destination_at_same_station() -> None:
    """Given a circular train, when deriving stops, then origin and destination are not merged."""
    train = make_train(
        1,
        [
            row(DEPARTURE, 1, at(10)),
            row(ARRIVAL, 10, at(10, 5)),
            row(DEPARTURE, 10, at(10, 6)),
            row(ARRIVAL, 1, at(10, 30)),
        ],
    )

    at_helsinki = stops_at(train, 1)

    assert len(at_helsinki) == 2
    assert at_helsinki[0].is_origin()
    assert at_helsinki[1].is_destination()
    assert stops_at(train, 10)[0].is_waypoint()
    assert stops_at(train, 999) == []


def test_commercial_stops_skip_technical_stops() -> None:
    """Given a non-commercial waypoint, when listing commercial stops, then it is left out."""
    train = make_train(
        1,
        [
            row(DEPARTURE, 1, at(10)),
            row(ARRIVAL, 10, at(10, 5), commercial_stop=False),
            row(DEPARTURE, 10, at(10, 6), commercial_stop=False),
            row(ARRIVAL, 15, at(10, 10), commercial_stop=None, train_stopping=False),
            row(DEPARTURE, 15, at(10, 10), commercial_stop=None, train_stopping=False),
            row(ARRIVAL, 18, at(10, 30)),
        ],
    )

    assert [stop.station_code() for stop in commercial_stops(train)] == [1, 18]


def test_commercial_stop_needs_only_one_commercial_side() -> None:
    """Given a waypoint with one commercial row, when listing commercial stops, then it is kept."""
    train = make_train(
        1,
        [
            row(DEPARTURE, 1, at(10)),
            row(ARRIVAL, 10, at(10, 5), commercial_stop=False),
            row(DEPARTURE, 10, at(10, 6), commercial_stop=True),
            row(ARRIVAL, 18, at(10, 30)),
        ],
    )

    assert [stop.station_code() for stop in commercial_stops(train)] == [1, 10, 18]


def test_current_commercial_stop_is_last_with_actual_time() -> None:
    """Given a train that has left Pasila, when asking the current stop, then it is Pasila."""
    current = current_commercial_stop(helsinki_to_kerava())

    assert current is not None
    assert current.station_code() == 10


def test_current_commercial_stop_is_none_before_start() -> None:
    """Given a train with no actual times, when asking the current stop, then it is None."""
    train = make_train(1, [row(DEPARTURE, 1, at(10)), row(ARRIVAL, 18, at(10, 30))])

    assert current_commercial_stop(train) is None


def test_current_commercial_stop_uses_ready_origin() -> None:
    """Given an origin marked ready, when asking the current stop, then it is the origin."""
    train = make_train(
        1, [row(DEPARTURE, 1, at(10), marked_ready=True), row(ARRIVAL, 18, at(10, 30))]
    )

    current = current_commercial_stop(train)

    assert current is not None
    assert current.is_origin()


def test_timetable_entries_filter_by_cutoff_and_sort() -> None:
    """Given trains at Pasila, when listing entries, then past trains are dropped and others sorted."""
    departed_long_ago = make_train(
        1,
        [
            row(DEPARTURE, 1, at(11, 0), actual_time=at(11, 0)),
            row(ARRIVAL, 10, at(11, 5), actual_time=at(11, 5)),
            row(DEPARTURE, 10, at(11, 6), actual_time=at(11, 6)),
            row(ARRIVAL, 18, at(11, 30), actual_time=at(11, 30)),
        ],
    )
    later = make_train(
        3,
        [
            row(DEPARTURE, 1, at(12, 30)),
            row(ARRIVAL, 10, at(12, 35)),
            row(DEPARTURE, 10, at(12, 36)),
            row(ARRIVAL, 18, at(13, 0)),
        ],
    )
    sooner = make_train(
        2,
        [
            row(DEPARTURE, 1, at(12, 10)),
            row(ARRIVAL, 10, at(12, 15)),
            row(DEPARTURE, 10, at(12, 16)),
            row(ARRIVAL, 18, at(12, 40)),
        ],
    )

    entries = timetable_entries([departed_long_ago, later, sooner], 10, BOTH, at(12, 0))

    assert [train.number for train, _ in entries] == [2, 3]
    assert all(stop.station_code() == 10 for _, stop in entries)


def test_timetable_entries_of_arrivals_only() -> None:
    """Given arrivals only, when listing entries at the origin, then the origin is left out."""
    train = make_train(1, [row(DEPARTURE, 1, at(12, 10)), row(ARRIVAL, 18, at(12, 40))])

    assert timetable_entries([train], 1, {ARRIVAL}, at(12, 0)) == []
    assert len(timetable_entries([train], 1, {DEPARTURE}, at(12, 0))) == 1
    assert len(timetable_entries([train], 18, {ARRIVAL}, at(12, 0))) == 1


def test_timetable_entries_sort_by_arrival_time() -> None:
    """Given arrivals only, when sorting entries, then the arrival times decide the order."""
    first = make_train(
        1,
        [row(DEPARTURE, 1, at(11, 0)), row(ARRIVAL, 18, at(12, 40))],
        category=TrainCategory.COMMUTER,
    )
    second = make_train(2, [row(DEPARTURE, 1, at(12, 0)), row(ARRIVAL, 18, at(12, 20))])

    entries = timetable_entries([first, second], 18, {ARRIVAL}, at(12, 0))

    assert [train.number for train, _ in entries] == [2, 1]
