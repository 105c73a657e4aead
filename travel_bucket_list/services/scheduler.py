"""
Build-a-Year scheduler.

Given a target year, suggests unplanned trips to fill the leave still free
in that year. Selection is a greedy pass over trips ranked by score, not an
optimal packing: the output is a list of suggestions the user accepts or
ignores one by one.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from travel_bucket_list.data.models import PlannerSettings, Trip, TripStatus
from travel_bucket_list.data.repository import TripRepository
from travel_bucket_list.utils.logging import ServiceLogger

BEST_MONTH_MULTIPLIER = 2
FALLBACK_MULTIPLIER = 0.8

NO_UNPLANNED_TRIPS = "no_unplanned_trips"
NOTHING_FITS_BUDGET = "nothing_fits_budget"

log = ServiceLogger("scheduler")


@dataclass
class Recommendation:
    """A suggested trip for the target year and the month proposed for it."""

    trip: Trip
    month: int | None
    score: float
    has_best_month: bool


@dataclass
class YearPlan:
    """Scheduler output for one year."""

    year: int
    used_leave: int
    remaining_leave: int
    used_budget: float
    recommendations: list[Recommendation] = field(default_factory=list)
    reason: str | None = None

    @property
    def suggested_nights(self) -> int:
        return sum(rec.trip.nights for rec in self.recommendations)

    @property
    def suggested_cost(self) -> float:
        return sum(rec.trip.cost_estimate for rec in self.recommendations)

    @property
    def leave_left_after(self) -> int:
        return self.remaining_leave - self.suggested_nights

    def month_collisions(self) -> dict[int, list[Recommendation]]:
        """
        Months proposed for more than one recommendation in this batch.

        Only months already taken in the year are avoided when picking; two
        new suggestions can still land on the same month.
        """
        counts = Counter(rec.month for rec in self.recommendations if rec.month)
        return {
            month: [rec for rec in self.recommendations if rec.month == month]
            for month, count in sorted(counts.items())
            if count > 1
        }


@dataclass
class BatchAcceptance:
    """Totals for an "accept all" of a year plan."""

    count: int = 0
    total_nights: int = 0
    total_cost: float = 0
    trips: list[Trip] = field(default_factory=list)


def _candidate_month(trip: Trip, occupied: set[int]) -> tuple[int | None, bool]:
    """First free best month, else the first best month, else None."""
    months = trip.best_months or []
    for month in months:
        if month not in occupied:
            return month, True
    if months:
        return months[0], False
    return None, False


def build_year(year: int, trips: Iterable[Trip], settings: PlannerSettings) -> YearPlan:
    """
    Suggest unplanned trips for ``year`` within the leave left that year.

    Trips already planned in the year are never moved, even when they
    overcommit it; an overcommitted year simply has no room for more.

    Args:
        year: Target year
        trips: Full trip collection
        settings: Planner settings carrying the annual leave budget

    Returns:
        The year plan, with a ``reason`` when nothing is recommended
    """
    trips = list(trips)
    year_trips = [trip for trip in trips if trip.planned_year == year]
    unplanned = [
        trip
        for trip in trips
        if trip.planned_year is None and trip.status != TripStatus.DONE
    ]

    used_leave = sum(trip.nights or 0 for trip in year_trips)
    remaining_leave = settings.annual_leave_days - used_leave
    used_budget = sum(trip.cost_estimate or 0 for trip in year_trips)
    occupied = {trip.planned_month for trip in year_trips if trip.planned_month}

    plan = YearPlan(
        year=year,
        used_leave=used_leave,
        remaining_leave=remaining_leave,
        used_budget=used_budget,
    )

    if not unplanned:
        plan.reason = NO_UNPLANNED_TRIPS
        log.info(f"No unplanned trips to schedule for {year}")
        return plan

    candidates: list[Recommendation] = []
    for trip in unplanned:
        month, has_best_month = _candidate_month(trip, occupied)
        multiplier = BEST_MONTH_MULTIPLIER if has_best_month else FALLBACK_MULTIPLIER
        score = (trip.priority or 1) * multiplier
        if (trip.nights or 0) > remaining_leave:
            continue
        candidates.append(
            Recommendation(
                trip=trip, month=month, score=score, has_best_month=has_best_month
            )
        )

    # sorted() is stable: equal scores keep the pool's order
    candidates = sorted(candidates, key=lambda rec: rec.score, reverse=True)

    left = remaining_leave
    for candidate in candidates:
        nights = candidate.trip.nights or 0
        if nights > left:
            continue
        plan.recommendations.append(candidate)
        left -= nights

    if not plan.recommendations:
        plan.reason = NOTHING_FITS_BUDGET

    log.info(
        f"Built {year}: {len(plan.recommendations)} suggestion(s), "
        f"{plan.suggested_nights} of {max(remaining_leave, 0)} free nights"
    )
    return plan


def accept_one(
    repository: TripRepository, recommendation: Recommendation, year: int
) -> Trip | None:
    """Place one recommended trip on the timeline at its proposed month."""
    return repository.assign(recommendation.trip.id, year, recommendation.month)


def accept_all(repository: TripRepository, plan: YearPlan) -> BatchAcceptance:
    """Accept every recommendation of a plan, in ranking order."""
    result = BatchAcceptance()
    for recommendation in plan.recommendations:
        trip = accept_one(repository, recommendation, plan.year)
        if trip is None:
            continue
        result.count += 1
        result.total_nights += trip.nights
        result.total_cost += trip.cost_estimate
        result.trips.append(trip)

    collisions = plan.month_collisions()
    if collisions:
        log.warning(
            f"Accepted plan for {plan.year} doubles up months {sorted(collisions)}"
        )
    return result
