"""Location domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Geographic location in WGS-84 format."""

    latitude: float
    longitude: float
