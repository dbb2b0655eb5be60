"""Delay cause domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DelayCause:
    """Cause of a delay, pointing into the three level cause category table."""

    category_id: int
    detailed_category_id: int | None = None
    third_level_category_id: int | None = None

    def __str__(self) -> str:
        detailed = self.detailed_category_id if self.detailed_category_id is not None else "-"
        third = self.third_level_category_id if self.third_level_category_id is not None else "-"
        return f"DelayCause({self.category_id}, {detailed}, {third})"


@dataclass(frozen=True)
class PassengerFriendlyName:
    """Passenger friendly names for a cause category in each supported language."""

    fi: str
    en: str
    sv: str

    def for_locale(self, locale: str | None) -> str:
        """Return the name for the given locale. Defaults to English.

        Accepts plain language codes ("fi") as well as full locale tags
        ("sv_FI", "fi-FI").
        """
        language = locale.replace("-", "_").split("_")[0].lower() if locale else None
        if language == "fi":
            return self.fi
        if language == "sv":
            return self.sv
        return self.en


@dataclass(frozen=True)
class CauseCategory:
    """Single delay cause category."""

    id: int
    name: str
    passenger_friendly_name: PassengerFriendlyName | None = None


@dataclass(frozen=True)
class CauseCategories:
    """All delay cause categories divided into three category levels."""

    categories: tuple[CauseCategory, ...] = field(default_factory=tuple)
    detailed_categories: tuple[CauseCategory, ...] = field(default_factory=tuple)
    third_level_categories: tuple[CauseCategory, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return (
            f"CauseCategories({len(self.categories)} categories, "
            f"{len(self.detailed_categories)} detailed categories, "
            f"{len(self.third_level_categories)} third level categories)"
        )
