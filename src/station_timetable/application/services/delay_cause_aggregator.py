"""Collects a train's delay causes and resolves their names."""

from station_timetable.domain.models import CauseCategories, CauseCategory, DelayCause, Train

UNKNOWN_CAUSE_NAME = "-"


def delay_causes(train: Train) -> list[DelayCause]:
    """Return the distinct delay causes of the train in order of first occurrence."""
    # dict keeps insertion order and drops duplicates
    causes = dict.fromkeys(cause for row in train.timetable for cause in row.causes)
    return list(causes)


def _find(categories: tuple[CauseCategory, ...], category_id: int | None) -> CauseCategory | None:
    if category_id is None:
        return None
    return next((category for category in categories if category.id == category_id), None)


def _matching_categories(categories: CauseCategories, cause: DelayCause) -> list[CauseCategory]:
    """Categories of the cause from the most specific level to the least specific one."""
    candidates = [
        _find(categories.third_level_categories, cause.third_level_category_id),
        _find(categories.detailed_categories, cause.detailed_category_id),
        _find(categories.categories, cause.category_id),
    ]
    return [category for category in candidates if category is not None]


def passenger_friendly_name_for(
    categories: CauseCategories, cause: DelayCause, locale: str | None = None
) -> str:
    """Return the passenger friendly name of the most specific matching category.

    Categories without a passenger friendly name are skipped. Returns "-" if none
    of the categories of the cause has one.
    """
    for category in _matching_categories(categories, cause):
        if category.passenger_friendly_name is not None:
            return category.passenger_friendly_name.for_locale(locale)
    return UNKNOWN_CAUSE_NAME


def category_name_for(categories: CauseCategories, cause: DelayCause) -> str:
    """Return the technical name of the most specific matching category, or "-"."""
    matching = _matching_categories(categories, cause)
    return matching[0].name if matching else UNKNOWN_CAUSE_NAME
