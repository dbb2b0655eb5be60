"""Station name mapper with localized and commercial station names."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from station_timetable.domain.models import Station

# Commercial names of the stations whose name in the station metadata is not the one
# shown to passengers, e.g. "Helsinki asema".
_FINNISH_NAMES: dict[int, str] = {
    1: "Helsinki",
    10: "Pasila",
    18: "Tikkurila",
    20: "Kerava",
    30: "Hyvinkää",
    40: "Riihimäki",
    47: "Hämeenlinna",
    66: "Espoo",
    68: "Leppävaara",
    100: "Lahti",
    130: "Turku",
    160: "Tampere",
    220: "Pori",
    280: "Seinäjoki",
    288: "Vaasa",
    312: "Kokkola",
    370: "Oulu",
    408: "Kuopio",
    460: "Joensuu",
    480: "Kouvola",
    495: "Lappeenranta",
    546: "Mikkeli",
    1332: "Lentoasema",
}

_SWEDISH_NAMES: dict[int, str] = {
    **_FINNISH_NAMES,
    1: "Helsingfors",
    10: "Böle",
    18: "Dickursby",
    20: "Kervo",
    30: "Hyvinge",
    47: "Tavastehus",
    66: "Esbo",
    68: "Alberga",
    100: "Lahtis",
    130: "Åbo",
    160: "Tammerfors",
    220: "Björneborg",
    288: "Vasa",
    312: "Karleby",
    370: "Uleåborg",
    495: "Villmanstrand",
    546: "S:t Michel",
    1332: "Flygstationen",
}

_ENGLISH_NAMES: dict[int, str] = {
    **_FINNISH_NAMES,
    1332: "Airport",
}

LOCALIZED_STATION_NAMES: dict[str, dict[int, str]] = {
    "fi": _FINNISH_NAMES,
    "sv": _SWEDISH_NAMES,
    "en": _ENGLISH_NAMES,
}


class LocalizedStationNames:
    """Maps station codes to station names, preferring localized names."""

    def __init__(self, names: Mapping[int, str]) -> None:
        self._names = dict(names)

    @classmethod
    def from_stations(
        cls,
        stations: Iterable[Station],
        locale: str | None = None,
        localized_names: Mapping[int, str] | None = None,
    ) -> LocalizedStationNames:
        """Create the mapping for the given stations.

        Explicit localized names take precedence over the built-in names of the
        locale, which take precedence over the station's own name.
        """
        overrides: dict[int, str] = dict(LOCALIZED_STATION_NAMES.get(locale or "", {}))
        if localized_names:
            overrides.update(localized_names)
        return cls({station.code: overrides.get(station.code, station.name) for station in stations})

    def station_name(self, station_code: int) -> str | None:
        return self._names.get(station_code)

    def __len__(self) -> int:
        return len(self._names)
