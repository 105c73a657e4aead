"""
Savings projection against the cost of planned trips.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from travel_bucket_list.data.models import SavingsState, Trip
from travel_bucket_list.utils.error_handling import safe_execute
from travel_bucket_list.utils.helpers import add_months


@dataclass
class SavingsProjection:
    percent: float
    remaining: float
    months_to_go: int | None
    funded_date: date | None


def project(
    total_planned_cost: float,
    total_saved: float,
    monthly_saving: float,
    today: date | None = None,
) -> SavingsProjection:
    """
    Project when savings will cover the planned trips.

    ``months_to_go`` is None when nothing is being saved each month; the
    funded date is then unknown too. A fully funded plan has zero months
    to go and a funded date of today. A saving rate so small that the
    funded date would fall after the year 9999 keeps its month count but
    has no funded date.

    Args:
        total_planned_cost: Summed cost of trips on the timeline
        total_saved: Money already put aside
        monthly_saving: Amount added each month
        today: Reference date (defaults to the current date)

    Returns:
        The savings projection
    """
    today = today or date.today()

    if total_planned_cost > 0:
        percent = min(100.0, total_saved / total_planned_cost * 100)
    else:
        percent = 0.0

    remaining = max(0.0, total_planned_cost - total_saved)

    if monthly_saving <= 0:
        return SavingsProjection(
            percent=percent, remaining=remaining, months_to_go=None, funded_date=None
        )

    ratio = remaining / monthly_saving
    months_to_go = math.ceil(ratio) if math.isfinite(ratio) else None
    funded_date = None
    if months_to_go is not None:
        # Past the last representable date the plan is never funded
        funded_date = safe_execute(add_months, today, months_to_go)
    return SavingsProjection(
        percent=percent,
        remaining=remaining,
        months_to_go=months_to_go,
        funded_date=funded_date,
    )


def planned_budget(trips: Iterable[Trip]) -> float:
    return sum(trip.cost_estimate or 0 for trip in trips if trip.is_planned)


def project_for(
    trips: Iterable[Trip], savings: SavingsState, today: date | None = None
) -> SavingsProjection:
    """Projection for the planned trips of a collection and a savings state."""
    return project(
        planned_budget(trips), savings.total_saved, savings.monthly_saving, today
    )
