"""
Aggregation engine for the dashboard, budget and timeline views.

Every function here is pure: it reads a trip collection (and settings where
a leave budget is involved) and returns summaries. Nothing is cached; the
views recompute on every read.
"""

import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from travel_bucket_list.data.models import (
    PlannerSettings,
    Trip,
    TripCategory,
    TripStatus,
    YearSummary,
)
from travel_bucket_list.services.geo import classify
from travel_bucket_list.utils.helpers import round_half_up


@dataclass
class TripTotals:
    """Headline numbers for a trip collection."""

    count: int = 0
    total_cost: float = 0
    total_nights: int = 0
    destinations: int = 0


@dataclass
class BudgetStats:
    """Figures behind the budget panel and dashboard cards."""

    total_budget: float = 0
    planned_budget: float = 0
    booked_cost: float = 0
    average_per_trip: int = 0
    average_per_night: int = 0
    most_expensive: Trip | None = None
    cheapest: Trip | None = None
    top_category: TripCategory | None = None


@dataclass
class NextBooked:
    """The soonest booked trip with a month, and days until it starts."""

    trip: Trip
    days_until: int


@dataclass
class TimelineSlot:
    """Trips placed in one year, in one month or unscheduled (month None)."""

    year: int
    month: int | None
    trips: list[Trip] = field(default_factory=list)


def total_cost(trips: Iterable[Trip]) -> float:
    return sum(trip.cost_estimate or 0 for trip in trips)


def total_nights(trips: Iterable[Trip]) -> int:
    return sum(trip.nights or 0 for trip in trips)


def totals(trips: Iterable[Trip]) -> TripTotals:
    trips = list(trips)
    return TripTotals(
        count=len(trips),
        total_cost=total_cost(trips),
        total_nights=total_nights(trips),
        destinations=len({trip.destination for trip in trips}),
    )


def by_status(trips: Iterable[Trip]) -> dict[TripStatus, int]:
    """Trip count per status, every status present (zero when unused)."""
    counts = Counter(trip.status for trip in trips)
    return {status: counts.get(status, 0) for status in TripStatus}


def by_category(trips: Iterable[Trip]) -> dict[TripCategory, int]:
    """Trip count per category, only categories in use, most common first."""
    return dict(Counter(trip.category for trip in trips).most_common())


def cost_by_category(trips: Iterable[Trip]) -> list[tuple[TripCategory, float]]:
    """Summed cost per category, most expensive first."""
    costs: dict[TripCategory, float] = {}
    for trip in trips:
        costs[trip.category] = costs.get(trip.category, 0) + (trip.cost_estimate or 0)
    return sorted(costs.items(), key=lambda item: item[1], reverse=True)


def by_continent(trips: Iterable[Trip]) -> dict[str, int]:
    return dict(Counter(classify(trip) for trip in trips))


def by_planned_year(trips: Iterable[Trip]) -> dict[int, int]:
    """Count of planned trips per year, in year order."""
    counts = Counter(trip.planned_year for trip in trips if trip.is_planned)
    return dict(sorted(counts.items()))


def cost_by_year(trips: Iterable[Trip]) -> list[tuple[int, float]]:
    """Summed cost of planned trips per year, in year order."""
    costs: dict[int, float] = {}
    for trip in trips:
        if trip.is_planned:
            year = trip.planned_year
            costs[year] = costs.get(year, 0) + (trip.cost_estimate or 0)
    return sorted(costs.items())


def best_month_histogram(trips: Iterable[Trip]) -> dict[int, int]:
    """
    How many trips list each month (1-12) as a best month.

    A trip with several best months counts once in each of them.
    """
    histogram = {month: 0 for month in range(1, 13)}
    for trip in trips:
        for month in trip.best_months or []:
            if month in histogram:
                histogram[month] += 1
    return histogram


def year_summary(
    year: int, trips: Iterable[Trip], settings: PlannerSettings
) -> YearSummary:
    """Leave and cost committed to ``year`` against the annual leave budget."""
    year_trips = [trip for trip in trips if trip.planned_year == year]
    nights = total_nights(year_trips)
    return YearSummary(
        year=year,
        trips=year_trips,
        total_nights=nights,
        total_cost=total_cost(year_trips),
        leave_days_used=nights,
        leave_days_available=settings.annual_leave_days,
        is_overcommitted=nights > settings.annual_leave_days,
    )


def year_summaries(
    trips: Iterable[Trip], settings: PlannerSettings
) -> list[YearSummary]:
    """One summary per year of the settings' timeline range."""
    trips = list(trips)
    return [year_summary(year, trips, settings) for year in settings.years]


def overcommitted_years(trips: Iterable[Trip], settings: PlannerSettings) -> list[int]:
    return [
        summary.year
        for summary in year_summaries(trips, settings)
        if summary.is_overcommitted
    ]


def budget_stats(trips: Iterable[Trip]) -> BudgetStats:
    trips = list(trips)
    if not trips:
        return BudgetStats()

    total = total_cost(trips)
    nights = total_nights(trips)
    planned = total_cost(trip for trip in trips if trip.is_planned)
    booked = total_cost(
        trip
        for trip in trips
        if trip.status in (TripStatus.BOOKED, TripStatus.DONE)
    )

    # First trip wins ties, matching a left-to-right scan
    most_expensive = trips[0]
    cheapest = trips[0]
    for trip in trips[1:]:
        if trip.cost_estimate > most_expensive.cost_estimate:
            most_expensive = trip
        if trip.cost_estimate < cheapest.cost_estimate:
            cheapest = trip

    category_counts = Counter(trip.category for trip in trips)
    top_category = max(category_counts, key=category_counts.__getitem__)

    return BudgetStats(
        total_budget=total,
        planned_budget=planned,
        booked_cost=booked,
        average_per_trip=round_half_up(total / len(trips)),
        average_per_night=round_half_up(total / nights) if nights > 0 else 0,
        most_expensive=most_expensive,
        cheapest=cheapest,
        top_category=top_category,
    )


def in_season(trips: Iterable[Trip], month: int) -> list[Trip]:
    """Trips not yet done whose best months include ``month``, by priority."""
    matches = [
        trip
        for trip in trips
        if month in (trip.best_months or []) and trip.status != TripStatus.DONE
    ]
    return sorted(matches, key=lambda trip: trip.priority, reverse=True)


def next_booked(trips: Iterable[Trip], today: date | None = None) -> NextBooked | None:
    """
    The earliest booked trip that has both a year and a month.

    Days are counted to the first of the planned month and never go below
    zero, so a trip in the current month reads as "0 days".
    """
    today = today or date.today()
    booked = [
        trip
        for trip in trips
        if trip.status == TripStatus.BOOKED and trip.planned_year and trip.planned_month
    ]
    if not booked:
        return None

    trip = min(booked, key=lambda t: (t.planned_year, t.planned_month))
    start = date(trip.planned_year, trip.planned_month, 1)
    days = max(0, math.ceil((start - today).days))
    return NextBooked(trip=trip, days_until=days)


def timeline_slots(trips: Iterable[Trip]) -> list[TimelineSlot]:
    """
    Planned trips grouped per (year, month), in timeline order.

    Trips planned for a year without a month form that year's unscheduled
    slot (month None), listed after the year's twelve months.
    """
    slots: dict[tuple[int, int | None], TimelineSlot] = {}
    for trip in trips:
        if not trip.is_planned:
            continue
        key = (trip.planned_year, trip.planned_month)
        if key not in slots:
            slots[key] = TimelineSlot(year=key[0], month=key[1])
        slots[key].trips.append(trip)

    return sorted(
        slots.values(),
        key=lambda slot: (slot.year, slot.month if slot.month is not None else 13),
    )
