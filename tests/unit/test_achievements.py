"""Tests for the achievement evaluator."""

from travel_bucket_list.data.defaults import default_trips
from travel_bucket_list.data.models import TripCategory
from travel_bucket_list.services.achievements import (
    ACHIEVEMENTS,
    ACHIEVEMENTS_BY_ID,
    evaluate,
    unlocked,
)


def test_fixed_order_and_unique_ids():
    ids = [achievement.id for achievement in ACHIEVEMENTS]
    assert ids == [
        "first_planning",
        "first_booked",
        "first_done",
        "five_planned",
        "ten_destinations",
        "hundred_nights",
        "big_budget",
        "half_booked",
        "all_categories",
        "five_continents",
    ]
    assert len(ACHIEVEMENTS_BY_ID) == len(ids)


def test_nothing_unlocked_for_empty_list():
    assert unlocked([]) == []


def test_status_achievements(sample_trips):
    ids = unlocked(sample_trips)
    assert "first_planning" in ids
    assert "first_booked" in ids
    assert "first_done" in ids


def test_half_booked(make_trip):
    trips = [make_trip(status="Booked"), make_trip(status="Dream")]
    assert "half_booked" in unlocked(trips)
    trips.append(make_trip(status="Dream"))
    assert "half_booked" not in unlocked(trips)


def test_volume_achievements(make_trip):
    trips = [
        make_trip(
            destination=f"Place {i}", nights=10, costEstimate=5000, plannedYear=2026
        )
        for i in range(10)
    ]
    ids = unlocked(trips)
    assert "five_planned" in ids
    assert "ten_destinations" in ids
    assert "hundred_nights" in ids
    assert "big_budget" in ids


def test_all_categories(make_trip):
    categories = list(TripCategory)[:8]
    trips = [make_trip(category=category) for category in categories]
    assert "all_categories" in unlocked(trips)
    assert "all_categories" not in unlocked(trips[:7])


def test_seed_catalogue_reaches_five_continents():
    assert "five_continents" in unlocked(default_trips())


def test_evaluate_returns_only_new_ids_in_order(sample_trips):
    first = evaluate(sample_trips, [])
    assert first == unlocked(sample_trips)
    assert evaluate(sample_trips, first) == []


def test_evaluate_is_monotonic(make_trip, sample_trips):
    already = evaluate(sample_trips, [])
    more = [*sample_trips, make_trip(status="Booked"), make_trip(status="Done")]
    new_ids = evaluate(more, already)
    assert not set(new_ids) & set(already)
