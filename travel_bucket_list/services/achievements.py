"""
Achievement badges.

Each achievement is a named predicate over the full trip collection. The
evaluator keeps no state: callers pass in the ids already unlocked and
persist whatever comes back.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from travel_bucket_list.data.models import Trip, TripStatus
from travel_bucket_list.services.geo import classify


@dataclass(frozen=True)
class Achievement:
    id: str
    label: str
    description: str
    icon: str
    check: Callable[[list[Trip]], bool]


def _has_status(status: TripStatus) -> Callable[[list[Trip]], bool]:
    return lambda trips: any(trip.status == status for trip in trips)


def _half_booked(trips: list[Trip]) -> bool:
    if not trips:
        return False
    booked = sum(
        1 for trip in trips if trip.status in (TripStatus.BOOKED, TripStatus.DONE)
    )
    return booked >= len(trips) / 2


ACHIEVEMENTS: list[Achievement] = [
    Achievement(
        "first_planning",
        "Getting Started",
        "Move a trip into Planning",
        "📝",
        _has_status(TripStatus.PLANNING),
    ),
    Achievement(
        "first_booked",
        "First Booking!",
        "Book your first trip",
        "🎫",
        _has_status(TripStatus.BOOKED),
    ),
    Achievement(
        "first_done",
        "Memory Made",
        "Complete your first trip",
        "🏆",
        _has_status(TripStatus.DONE),
    ),
    Achievement(
        "five_planned",
        "Master Planner",
        "Put 5 trips on the timeline",
        "📅",
        lambda trips: sum(1 for trip in trips if trip.is_planned) >= 5,
    ),
    Achievement(
        "ten_destinations",
        "Globe Trotter",
        "Add 10 different destinations",
        "🌍",
        lambda trips: len({trip.destination for trip in trips}) >= 10,
    ),
    Achievement(
        "hundred_nights",
        "Century Club",
        "Plan 100 nights of travel",
        "💯",
        lambda trips: sum(trip.nights or 0 for trip in trips) >= 100,
    ),
    Achievement(
        "big_budget",
        "Big Dreams",
        "Dream of £50,000 worth of travel",
        "💰",
        lambda trips: sum(trip.cost_estimate or 0 for trip in trips) >= 50000,
    ),
    Achievement(
        "half_booked",
        "Halfway There",
        "Book or complete half of your trips",
        "⚡",
        _half_booked,
    ),
    Achievement(
        "all_categories",
        "Renaissance Travellers",
        "Cover 8 different trip categories",
        "🎨",
        lambda trips: len({trip.category for trip in trips}) >= 8,
    ),
    Achievement(
        "five_continents",
        "Continental",
        "Reach 5 continents",
        "🗺️",
        lambda trips: len({classify(trip) for trip in trips}) >= 5,
    ),
]

ACHIEVEMENTS_BY_ID = {achievement.id: achievement for achievement in ACHIEVEMENTS}


def unlocked(trips: Iterable[Trip]) -> list[str]:
    """Ids of every achievement currently satisfied, in fixed order."""
    trips = list(trips)
    return [
        achievement.id for achievement in ACHIEVEMENTS if achievement.check(trips)
    ]


def evaluate(trips: Iterable[Trip], already_unlocked: Iterable[str]) -> list[str]:
    """
    Ids that are satisfied now but were not unlocked before.

    Running it again with the returned ids merged into ``already_unlocked``
    yields an empty list.
    """
    known = set(already_unlocked)
    return [
        achievement_id
        for achievement_id in unlocked(trips)
        if achievement_id not in known
    ]
