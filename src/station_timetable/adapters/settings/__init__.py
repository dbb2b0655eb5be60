"""Settings adapters."""

from station_timetable.adapters.settings.json_settings_repository import JsonSettingsRepository

__all__ = ["JsonSettingsRepository"]
