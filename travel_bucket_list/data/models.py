"""
Data models for the travel bucket list planner.

This module defines the core data structures: trips, the planner settings
that bound the timeline and leave budget, the savings state, and the
derived per-year summary. Persisted JSON uses the camelCase field names
(``costEstimate``, ``bestMonths``...) through pydantic aliases; Python code
uses the snake_case attribute names.

Every numeric trip field is coerced rather than rejected: a form that sends
``"abc"`` for nights stores 0 nights, it never raises.
"""

from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from travel_bucket_list.utils.helpers import (
    clamp,
    coerce_float,
    coerce_int,
    coerce_optional_float,
)

DEFAULT_PRIORITY = 3
MIN_PRIORITY = 1
MAX_PRIORITY = 5
MAX_YEAR = date.max.year

DEFAULT_CHECKLIST_ITEMS = [
    "Flights",
    "Accommodation",
    "Transport",
    "Activities",
    "Visa & Docs",
    "Packing",
]


class TripStatus(StrEnum):
    """Progression of a trip from idea to memory."""

    DREAM = "Dream"
    PLANNING = "Planning"
    BOOKED = "Booked"
    DONE = "Done"


STATUS_ORDER = [
    TripStatus.DREAM,
    TripStatus.PLANNING,
    TripStatus.BOOKED,
    TripStatus.DONE,
]


class TripCategory(StrEnum):
    ADVENTURE = "Adventure"
    BEACH = "Beach & Relaxation"
    CITY_BREAK = "City Break"
    CULTURAL = "Cultural"
    FOOD_AND_WINE = "Food & Wine"
    HONEYMOON = "Honeymoon"
    ROAD_TRIP = "Road Trip"
    SAFARI = "Safari & Wildlife"
    SKI = "Ski & Snow"
    WELLNESS = "Wellness"


class Continent(StrEnum):
    EUROPE = "Europe"
    ASIA = "Asia"
    AMERICAS = "Americas"
    AFRICA = "Africa"
    OCEANIA = "Oceania"
    ANTARCTICA = "Antarctica"


# Display order used when grouping trips by continent
CONTINENT_ORDER = [
    Continent.EUROPE,
    Continent.ASIA,
    Continent.AMERICAS,
    Continent.AFRICA,
    Continent.OCEANIA,
    Continent.ANTARCTICA,
]


class ChecklistItem(BaseModel):
    """One preparation step for a trip."""

    item: str
    done: bool = False


class Trip(BaseModel):
    """
    One planned or aspirational journey.

    A trip is "planned" once ``planned_year`` is set; ``planned_month`` is
    optional even then ("sometime that year") but never set on its own.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(default=None, frozen=True)
    name: str = ""
    destination: str = ""
    lat: float | None = None
    lng: float | None = None
    status: TripStatus = TripStatus.DREAM
    category: TripCategory = TripCategory.CULTURAL
    cost_estimate: float = Field(default=0, alias="costEstimate")
    currency: str = "£"
    nights: int = 0
    best_months: list[int] = Field(default_factory=list, alias="bestMonths")
    priority: int = DEFAULT_PRIORITY
    planned_year: int | None = Field(default=None, alias="plannedYear")
    planned_month: int | None = Field(default=None, alias="plannedMonth")
    notes: str = ""
    people: str = ""
    favourite: bool = False
    checklist: list[ChecklistItem] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> int | None:
        if value is None:
            return None
        number = coerce_int(value, 0)
        return number or None

    @field_validator(
        "name", "destination", "notes", "people", "currency", mode="before"
    )
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def coerce_coordinate(cls, value: Any) -> float | None:
        return coerce_optional_float(value)

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, value: Any) -> TripStatus:
        try:
            return TripStatus(value)
        except (ValueError, TypeError):
            return TripStatus.DREAM

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, value: Any) -> TripCategory:
        try:
            return TripCategory(value)
        except (ValueError, TypeError):
            return TripCategory.CULTURAL

    @field_validator("cost_estimate", mode="before")
    @classmethod
    def coerce_cost(cls, value: Any) -> float:
        return max(0.0, coerce_float(value, 0.0))

    @field_validator("nights", mode="before")
    @classmethod
    def coerce_nights(cls, value: Any) -> int:
        return max(0, coerce_int(value, 0))

    @field_validator("priority", mode="before")
    @classmethod
    def coerce_priority(cls, value: Any) -> int:
        number = coerce_int(value, 0) or DEFAULT_PRIORITY
        return clamp(number, MIN_PRIORITY, MAX_PRIORITY)

    @field_validator("best_months", mode="before")
    @classmethod
    def coerce_best_months(cls, value: Any) -> list[int]:
        if not isinstance(value, list | tuple | set):
            return []
        months: list[int] = []
        for raw in value:
            month = coerce_int(raw, 0)
            if 1 <= month <= 12 and month not in months:
                months.append(month)
        return months

    @field_validator("planned_year", mode="before")
    @classmethod
    def coerce_planned_year(cls, value: Any) -> int | None:
        year = coerce_int(value, 0)
        return year if 1 <= year <= MAX_YEAR else None

    @field_validator("planned_month", mode="before")
    @classmethod
    def coerce_planned_month(cls, value: Any) -> int | None:
        month = coerce_int(value, 0)
        return month if 1 <= month <= 12 else None

    @field_validator("favourite", mode="before")
    @classmethod
    def coerce_favourite(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("checklist", mode="before")
    @classmethod
    def coerce_checklist(cls, value: Any) -> list[ChecklistItem] | None:
        if not isinstance(value, list):
            return None
        items = []
        for entry in value:
            if isinstance(entry, ChecklistItem):
                items.append(entry)
            elif isinstance(entry, dict) and entry.get("item") is not None:
                items.append(
                    ChecklistItem(item=str(entry["item"]), done=bool(entry.get("done")))
                )
        return items

    @model_validator(mode="after")
    def month_requires_year(self) -> "Trip":
        if self.planned_year is None and self.planned_month is not None:
            self.planned_month = None
        return self

    @property
    def is_planned(self) -> bool:
        return self.planned_year is not None

    def effective_checklist(self) -> list[ChecklistItem]:
        """The trip's checklist, or the default one if none was ever saved."""
        if self.checklist is not None:
            return [entry.model_copy() for entry in self.checklist]
        return [ChecklistItem(item=item) for item in DEFAULT_CHECKLIST_ITEMS]

    def to_storage(self) -> dict[str, Any]:
        """JSON-ready dict using the persisted camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


class PlannerSettings(BaseModel):
    """Leave budget and the visible timeline range (inclusive)."""

    model_config = ConfigDict(populate_by_name=True)

    annual_leave_days: int = Field(default=25, alias="annualLeaveDays")
    timeline_start_year: int = Field(default=2025, alias="timelineStartYear")
    timeline_end_year: int = Field(default=2035, alias="timelineEndYear")

    @field_validator("annual_leave_days", mode="before")
    @classmethod
    def coerce_leave(cls, value: Any) -> int:
        return max(0, coerce_int(value, 0))

    @field_validator("timeline_start_year", "timeline_end_year", mode="before")
    @classmethod
    def coerce_year(cls, value: Any, info: ValidationInfo) -> int:
        number = coerce_int(value, 0)
        if number <= 0:
            return cls.model_fields[info.field_name].default
        return number

    @property
    def years(self) -> list[int]:
        return list(range(self.timeline_start_year, self.timeline_end_year + 1))

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SavingsState(BaseModel):
    """Money put aside for travel and the rate it grows at."""

    model_config = ConfigDict(populate_by_name=True)

    total_saved: float = Field(default=0, alias="totalSaved")
    monthly_saving: float = Field(default=500, alias="monthlySaving")

    @field_validator("total_saved", "monthly_saving", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> float:
        return max(0.0, coerce_float(value, 0.0))

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class YearSummary(BaseModel):
    """Leave and cost committed to one timeline year."""

    year: int
    trips: list[Trip] = Field(default_factory=list)
    total_nights: int = 0
    total_cost: float = 0
    leave_days_used: int = 0
    leave_days_available: int = 0
    is_overcommitted: bool = False

    @property
    def remaining_leave(self) -> int:
        return self.leave_days_available - self.leave_days_used
