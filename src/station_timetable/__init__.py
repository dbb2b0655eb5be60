"""Railway station timetables from the Digitraffic API."""

__version__ = "0.1.0"
