"""Mapping of Digitraffic wire models into domain models."""

import logging
from datetime import UTC, date, datetime

from station_timetable.adapters.digitraffic_api.network_entities import (
    AnyCauseCategoryNetworkEntity,
    CauseNetworkEntity,
    StationNetworkEntity,
    TimetableRowNetworkEntity,
    TrainNetworkEntity,
)
from station_timetable.domain.errors import MappingError
from station_timetable.domain.models import (
    CauseCategory,
    DelayCause,
    PassengerFriendlyName,
    Station,
    StationType,
    TimetableRow,
    TimetableRowType,
    Train,
    TrainCategory,
)

logger = logging.getLogger(__name__)


def _utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def station_to_domain(entity: StationNetworkEntity) -> Station:
    """Map a station. Raises MappingError on an unknown station type."""
    try:
        station_type = StationType.of(entity.type)
    except ValueError as e:
        raise MappingError(str(e)) from e
    return Station(
        code=entity.code,
        short_code=entity.short_code,
        name=entity.name,
        longitude=entity.longitude,
        latitude=entity.latitude,
        type=station_type,
        passenger_traffic=entity.passenger_traffic,
        country_code=entity.country_code,
    )


def cause_to_domain(entity: CauseNetworkEntity) -> DelayCause:
    return DelayCause(
        category_id=entity.category_id,
        detailed_category_id=entity.detailed_category_id,
        third_level_category_id=entity.third_category_id,
    )


def _row_type(value: str) -> TimetableRowType:
    for row_type in TimetableRowType:
        if row_type.value.lower() == value.lower():
            return row_type
    raise MappingError(f"Unknown timetable row type: '{value}'")


def timetable_row_to_domain(entity: TimetableRowNetworkEntity) -> TimetableRow:
    """Map a timetable row. Raises MappingError on an unknown row type."""
    return TimetableRow(
        type=_row_type(entity.type),
        station_code=entity.station_code,
        track=entity.track or None,
        scheduled_time=_utc(entity.scheduled_time),  # type: ignore[arg-type]
        estimated_time=_utc(entity.estimated_time),
        actual_time=_utc(entity.actual_time),
        difference_in_minutes=entity.difference_in_minutes or 0,
        train_stopping=entity.train_stopping,
        commercial_stop=entity.commercial_stop,
        cancelled=entity.cancelled,
        marked_ready=entity.train_ready is not None,
        causes=tuple(cause_to_domain(cause) for cause in entity.causes),
    )


def train_to_domain(entity: TrainNetworkEntity) -> Train | None:
    """Map a train.

    Returns None for a train of an unknown category. An unknown row type is
    a MappingError for the whole train.
    """
    try:
        category = TrainCategory.of(entity.category)
    except ValueError as e:
        logger.warning(f"Dropping train {entity.number}: {e}")
        return None
    return Train(
        number=entity.number,
        type=entity.type,
        category=category,
        commuter_line_id=entity.commuter_line_id or None,
        is_running=entity.running_currently,
        is_cancelled=entity.cancelled,
        departure_date=date.fromisoformat(entity.departure_date),
        version=entity.version,
        timetable=tuple(timetable_row_to_domain(row) for row in entity.timetable),
    )


def trains_to_domain(entities: list[TrainNetworkEntity]) -> list[Train]:
    """Map a list of trains, leaving out the trains that cannot be mapped."""
    trains = []
    for entity in entities:
        train = train_to_domain(entity)
        if train is not None:
            trains.append(train)
    return trains


def cause_category_to_domain(entity: AnyCauseCategoryNetworkEntity) -> CauseCategory:
    term = entity.passenger_term
    return CauseCategory(
        id=entity.id,
        name=entity.name,
        passenger_friendly_name=(
            PassengerFriendlyName(fi=term.fi, en=term.en, sv=term.sv) if term else None
        ),
    )
