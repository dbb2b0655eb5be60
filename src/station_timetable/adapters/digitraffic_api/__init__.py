"""Digitraffic railway API adapters."""

from station_timetable.adapters.digitraffic_api.http_client import DigitrafficHttpClient

__all__ = ["DigitrafficHttpClient"]
