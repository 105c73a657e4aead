"""
Smaller read-only helpers behind the trip detail, compare and export views.
"""

import random
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from travel_bucket_list.data.models import Trip, TripStatus
from travel_bucket_list.utils.helpers import format_price, month_label

COMPARE_LIMIT = 3
EXPORT_RULE_WIDTH = 42

_WORD_SPLIT = re.compile(r"[,\s]+")


def find_related_trips(trip: Trip, all_trips: Iterable[Trip]) -> list[Trip]:
    """
    Other trips this trip's notes mention.

    A trip is related when its full name, or any word longer than three
    letters from its destination, appears in the notes (case-insensitive).
    """
    if not trip.notes:
        return []

    notes = trip.notes.lower()
    related = []
    for other in all_trips:
        if other.id == trip.id:
            continue
        words = [w for w in _WORD_SPLIT.split(other.destination.lower()) if len(w) > 3]
        if any(word in notes for word in words) or other.name.lower() in notes:
            related.append(other)
    return related


@dataclass
class ComparisonRow:
    """One metric across the compared trips; ``best`` marks the winners."""

    key: str
    label: str
    values: list[str]
    best: list[bool] = field(default_factory=list)


def _stars(count: int) -> str:
    return "★" * (count or 0)


def _months(months: list[int]) -> str:
    return ", ".join(month_label(m) for m in months) or "—"


# (attribute, label, formatter, which value wins)
_METRICS = [
    ("cost_estimate", "Cost", lambda v: format_price(v or 0), "low"),
    ("nights", "Nights", lambda v: str(v or 0), None),
    ("priority", "Priority", _stars, "high"),
    ("best_months", "Best Months", _months, None),
    ("category", "Category", lambda v: str(v) if v else "—", None),
    ("people", "Who", lambda v: v or "—", None),
]


def compare_trips(trips: Sequence[Trip]) -> list[ComparisonRow]:
    """
    Side-by-side rows for two or three trips.

    Fewer than two trips gives no rows. Cost is best when lowest and
    priority when highest; ties mark every tied trip.
    """
    if len(trips) < 2:
        return []

    rows = []
    for key, label, fmt, best in _METRICS:
        raw = [getattr(trip, key) for trip in trips]
        if best == "low":
            target = min(raw)
        elif best == "high":
            target = max(raw)
        else:
            target = None
        rows.append(
            ComparisonRow(
                key=key,
                label=label,
                values=[fmt(value) for value in raw],
                best=[target is not None and value == target for value in raw],
            )
        )
    return rows


def toggle_compare(
    selected_ids: Sequence[int], trip_id: int, limit: int = COMPARE_LIMIT
) -> list[int]:
    """Add or remove a trip from the compare selection; a full selection is kept."""
    if trip_id in selected_ids:
        return [i for i in selected_ids if i != trip_id]
    if len(selected_ids) < limit:
        return [*selected_ids, trip_id]
    return list(selected_ids)


def pick_random(
    trips: Iterable[Trip], rng: random.Random | None = None
) -> Trip | None:
    """A random trip that has not been done yet, or None."""
    pool = [trip for trip in trips if trip.status != TripStatus.DONE]
    if not pool:
        return None
    return (rng or random).choice(pool)


def _trip_line(prefix: str, trip: Trip) -> str:
    return (
        f"  {prefix} {trip.name} — {trip.destination} "
        f"({trip.nights}n, {format_price(trip.cost_estimate)})"
    )


def export_plan(trips: Iterable[Trip], traveller_label: str) -> str:
    """
    Plain-text copy of the plan, one block per planned year.

    Each year shows its trip count, nights and cost, then one line per trip
    with its month (or TBD). Unplanned trips not yet done follow, highest
    priority first, with their priority drawn as stars.
    """
    trips = list(trips)
    planned = sorted(
        (trip for trip in trips if trip.is_planned),
        key=lambda t: (t.planned_year, t.planned_month or 0),
    )
    lines = [
        f"✈️ TRAVEL BUCKET LIST — {traveller_label}",
        "═" * EXPORT_RULE_WIDTH,
        "",
    ]

    for year in sorted({trip.planned_year for trip in planned}):
        year_trips = [trip for trip in planned if trip.planned_year == year]
        nights = sum(trip.nights for trip in year_trips)
        cost = sum(trip.cost_estimate for trip in year_trips)
        lines.append(
            f"── {year} ── ({len(year_trips)} trips · {nights} nights · "
            f"{format_price(cost)})"
        )
        for trip in year_trips:
            lines.append(_trip_line(month_label(trip.planned_month).ljust(4), trip))
        lines.append("")

    unplanned = [
        trip
        for trip in trips
        if not trip.is_planned and trip.status != TripStatus.DONE
    ]
    if unplanned:
        lines.append(f"── UNPLANNED ── ({len(unplanned)} trips)")
        for trip in sorted(unplanned, key=lambda t: t.priority, reverse=True):
            lines.append(_trip_line(_stars(trip.priority).ljust(5), trip))

    return "\n".join(lines)
