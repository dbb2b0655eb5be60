"""Caching building blocks."""

from station_timetable.adapters.store.compute_once import ComputeOnce
from station_timetable.adapters.store.store import InMemorySourceOfTruth, SourceOfTruth, Store

__all__ = ["ComputeOnce", "InMemorySourceOfTruth", "SourceOfTruth", "Store"]
