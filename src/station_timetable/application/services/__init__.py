"""Application services."""

from station_timetable.application.services.delay_cause_aggregator import (
    category_name_for,
    delay_causes,
    passenger_friendly_name_for,
)
from station_timetable.application.services.timetable_normalizer import (
    commercial_stops,
    current_commercial_stop,
    stops,
    stops_at,
    timetable_entries,
)

__all__ = [
    "category_name_for",
    "commercial_stops",
    "current_commercial_stop",
    "delay_causes",
    "passenger_friendly_name_for",
    "stops",
    "stops_at",
    "timetable_entries",
]
