"""Tests for domain models."""

import pytest

from station_timetable.domain.models import (
    DelayCause,
    PassengerFriendlyName,
    Station,
    StationType,
    Stop,
    TimetableRowType,
    TrainCategory,
    arrival,
    departure,
)
from station_timetable.domain.ports import rename, rename_and_sort
from tests.fakes import FakeNameMapper, at, make_station, make_train

ARRIVAL = TimetableRowType.ARRIVAL
DEPARTURE = TimetableRowType.DEPARTURE


def test_station_creation() -> None:
    """Given station data, when creating a Station, then all fields are set correctly."""
    station = Station(
        code=1,
        short_code="HKI",
        name="Helsinki asema",
        longitude=24.941249,
        latitude=60.172097,
    )

    assert station.code == 1
    assert station.short_code == "HKI"
    assert station.name == "Helsinki asema"
    assert station.type is StationType.STATION
    assert station.passenger_traffic is True
    assert station.country_code == "FI"


def test_station_type_of_rejects_unknown_type() -> None:
    """Given an unknown wire value, when resolving the station type, then ValueError is raised."""
    assert StationType.of("STOPPING_POINT") is StationType.STOPPING_POINT
    with pytest.raises(ValueError, match="Unknown station type"):
        StationType.of("HARBOUR")


def test_train_category_of_ignores_case() -> None:
    """Given the wire value in any case, when resolving the category, then it matches."""
    assert TrainCategory.of("Long-distance") is TrainCategory.LONG_DISTANCE
    assert TrainCategory.of("long-DISTANCE") is TrainCategory.LONG_DISTANCE
    assert TrainCategory.of("Commuter") is TrainCategory.COMMUTER
    with pytest.raises(ValueError, match="Unknown category"):
        TrainCategory.of("Cargo")


def test_stop_requires_arrival_or_departure() -> None:
    """Given neither row, when creating a Stop, then ValueError is raised."""
    with pytest.raises(ValueError, match="requires an arrival, a departure, or both"):
        Stop()


def test_stop_rejects_rows_of_wrong_type() -> None:
    """Given a departure row as arrival, when creating a Stop, then ValueError is raised."""
    with pytest.raises(ValueError, match="Stop arrival has type"):
        Stop(arrival=departure(1, "1", at(10)))
    with pytest.raises(ValueError, match="Stop departure has type"):
        Stop(departure=arrival(1, "1", at(10)))


def test_stop_rejects_rows_of_different_stations() -> None:
    """Given rows at two stations, when creating a Stop, then ValueError is raised."""
    with pytest.raises(ValueError, match="different stations"):
        Stop(arrival=arrival(1, "1", at(10)), departure=departure(2, "1", at(10, 2)))


def test_stop_kind_predicates() -> None:
    """Given stops of each kind, when checking the kind, then exactly one predicate holds."""
    origin = Stop(departure=departure(1, "4", at(10)))
    waypoint = Stop(arrival=arrival(10, "3", at(10, 5)), departure=departure(10, "3", at(10, 6)))
    destination = Stop(arrival=arrival(160, "8", at(11, 50)))

    assert (origin.is_origin(), origin.is_waypoint(), origin.is_destination()) == (
        True,
        False,
        False,
    )
    assert (waypoint.is_origin(), waypoint.is_waypoint(), waypoint.is_destination()) == (
        False,
        True,
        False,
    )
    assert destination.is_destination() and not destination.is_origin()
    assert waypoint.station_code() == 10
    assert destination.track() == "8"


def test_stop_track_prefers_arrival_track() -> None:
    """Given a waypoint with tracks on both rows, when reading the track, then arrival wins."""
    stop = Stop(arrival=arrival(10, "3", at(10, 5)), departure=departure(10, "4", at(10, 6)))
    assert stop.track() == "3"

    stop = Stop(arrival=arrival(10, None, at(10, 5)), departure=departure(10, "4", at(10, 6)))
    assert stop.track() == "4"


def test_stop_reached_and_departed() -> None:
    """Given actual times, when checking progress, then reached and departed follow them."""
    origin = Stop(departure=departure(1, "4", at(10)))
    assert origin.is_reached() is True
    assert origin.is_not_departed() is True

    waypoint = Stop(
        arrival=arrival(10, "3", at(10, 5), actual_time=at(10, 6)),
        departure=departure(10, "3", at(10, 7)),
    )
    assert waypoint.is_reached() is True
    assert waypoint.is_not_reached() is False
    assert waypoint.is_departed() is False

    destination = Stop(arrival=arrival(160, "8", at(11, 50)))
    assert destination.is_not_reached() is True
    assert destination.is_departed() is False


def test_time_of_next_event() -> None:
    """Given a waypoint in each phase, when asking for the next event, then times follow progress."""
    scheduled = Stop(arrival=arrival(10, "3", at(10, 5)), departure=departure(10, "3", at(10, 7)))
    assert scheduled.time_of_next_event() == at(10, 5)

    arrived = Stop(
        arrival=arrival(10, "3", at(10, 5), actual_time=at(10, 6)),
        departure=departure(10, "3", at(10, 7)),
    )
    assert arrived.time_of_next_event() == at(10, 7)

    departed = Stop(
        arrival=arrival(10, "3", at(10, 5), actual_time=at(10, 6)),
        departure=departure(10, "3", at(10, 7), actual_time=at(10, 8)),
    )
    assert departed.time_of_next_event() == at(10, 8)

    arrived_at_destination = Stop(arrival=arrival(160, "8", at(11, 50), actual_time=at(11, 52)))
    assert arrived_at_destination.time_of_next_event() == at(11, 52)


def test_arrival_and_departure_after() -> None:
    """Given a cutoff, when comparing rows, then unhappened or later events are after it."""
    stop = Stop(
        arrival=arrival(10, "3", at(10, 5), actual_time=at(10, 6)),
        departure=departure(10, "3", at(10, 7)),
    )

    assert stop.arrival_after(at(10, 0)) is True
    assert stop.arrival_after(at(10, 30)) is False
    assert stop.departure_after(at(10, 30)) is True
    assert Stop(departure=departure(1, "1", at(10))).arrival_after(at(9)) is False


def test_train_origin_destination_and_track() -> None:
    """Given a train with a timetable, when reading its endpoints, then they come from the rows."""
    train = make_train(
        27,
        [
            departure(1, "4", at(10)),
            arrival(10, "3", at(10, 5)),
            departure(10, "3", at(10, 6)),
            arrival(160, "8", at(11, 50)),
        ],
    )

    assert train.origin() == 1
    assert train.destination() == 160
    assert train.is_origin(1) and train.is_destination(160)
    assert train.track(10) == "3"
    assert train.track(999) is None
    assert train.departure_date_string == "2024-05-01"
    assert train.is_long_distance_train() and not train.is_commuter_train()


def test_train_without_timetable() -> None:
    """Given a train with no rows, when reading its endpoints, then they are None."""
    train = make_train(1, [])

    assert train.origin() is None
    assert train.destination() is None
    assert train.is_ready() is False
    assert train.has_reached_destination() is False


def test_train_ready_and_reached_destination() -> None:
    """Given a ready origin and an arrived destination, when checking, then both hold."""
    train = make_train(
        27,
        [
            departure(1, "4", at(10), marked_ready=True),
            arrival(160, "8", at(11, 50), actual_time=at(11, 49)),
        ],
    )

    assert train.is_ready() is True
    assert train.is_not_ready() is False
    assert train.has_reached_destination() is True


@pytest.mark.parametrize(
    ("locale", "expected"),
    [
        ("fi", "Ratatyö"),
        ("fi-FI", "Ratatyö"),
        ("sv_FI", "Banarbete"),
        ("SV", "Banarbete"),
        ("en", "Track work"),
        ("de", "Track work"),
        (None, "Track work"),
    ],
)
def test_passenger_friendly_name_for_locale(locale: str | None, expected: str) -> None:
    """Given a locale, when picking the name, then its language is used with English fallback."""
    name = PassengerFriendlyName(fi="Ratatyö", en="Track work", sv="Banarbete")

    assert name.for_locale(locale) == expected


def test_delay_cause_str_shows_missing_levels() -> None:
    """Given a cause without lower levels, when formatting, then missing ids show as dashes."""
    assert str(DelayCause(5)) == "DelayCause(5, -, -)"
    assert str(DelayCause(5, 12, 40)) == "DelayCause(5, 12, 40)"


def test_rename_and_sort() -> None:
    """Given a mapper knowing some stations, when renaming, then known ones are renamed and sorted."""
    stations = [make_station(1, "Helsinki asema"), make_station(10, "Pasila asema")]
    stations.append(make_station(20, "Kerava"))
    mapper = FakeNameMapper({1: "Helsinki", 10: "Pasila"})

    renamed = rename(mapper, stations)
    assert [station.name for station in renamed] == ["Helsinki", "Pasila", "Kerava"]

    sorted_stations = rename_and_sort(mapper, stations)
    assert [station.name for station in sorted_stations] == ["Helsinki", "Kerava", "Pasila"]
