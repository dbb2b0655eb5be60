"""Observable state holders."""

from station_timetable.application.state.observable_state import ObservableState

__all__ = ["ObservableState"]
