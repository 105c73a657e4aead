"""Tests for the Build-a-Year scheduler."""

import pytest

from travel_bucket_list.data.defaults import default_trips
from travel_bucket_list.data.models import PlannerSettings
from travel_bucket_list.data.repository import TripRepository
from travel_bucket_list.services.scheduler import (
    NO_UNPLANNED_TRIPS,
    NOTHING_FITS_BUDGET,
    accept_all,
    accept_one,
    build_year,
)


@pytest.fixture
def ten_days():
    return PlannerSettings(annual_leave_days=10)


def test_overfull_trip_excluded_and_small_trip_recommended(make_trip, ten_days):
    trips = [
        make_trip(name="Booked week", nights=7, plannedYear=2026),
        make_trip(name="Long", nights=5, priority=5, bestMonths=[6]),
        make_trip(name="Short", nights=2, priority=3, bestMonths=[]),
    ]

    plan = build_year(2026, trips, ten_days)

    assert plan.used_leave == 7
    assert plan.remaining_leave == 3
    assert [rec.trip.name for rec in plan.recommendations] == ["Short"]
    rec = plan.recommendations[0]
    assert rec.score == pytest.approx(2.4)
    assert rec.month is None
    assert rec.has_best_month is False
    assert plan.reason is None
    assert plan.leave_left_after == 1


def test_free_best_month_doubles_score(make_trip, ten_days):
    trips = [
        make_trip(nights=3, plannedYear=2026, plannedMonth=6),
        make_trip(name="Summer", nights=3, priority=4, bestMonths=[6, 7]),
    ]
    rec = build_year(2026, trips, ten_days).recommendations[0]
    assert rec.month == 7
    assert rec.has_best_month is True
    assert rec.score == 8


def test_occupied_best_months_fall_back_to_first(make_trip, ten_days):
    trips = [
        make_trip(nights=1, plannedYear=2026, plannedMonth=6),
        make_trip(nights=1, plannedYear=2026, plannedMonth=7),
        make_trip(name="Summer", nights=3, priority=4, bestMonths=[7, 6]),
    ]
    rec = build_year(2026, trips, ten_days).recommendations[0]
    assert rec.month == 7
    assert rec.has_best_month is False
    assert rec.score == pytest.approx(3.2)


def test_other_years_do_not_occupy_months(make_trip, ten_days):
    trips = [
        make_trip(nights=3, plannedYear=2027, plannedMonth=6),
        make_trip(name="Summer", nights=3, priority=2, bestMonths=[6]),
    ]
    plan = build_year(2026, trips, ten_days)
    assert plan.used_leave == 0
    assert plan.recommendations[0].month == 6
    assert plan.recommendations[0].has_best_month is True


def test_greedy_skips_what_no_longer_fits(make_trip, ten_days):
    trips = [
        make_trip(name="Big", nights=8, priority=5, bestMonths=[5]),
        make_trip(name="Medium", nights=5, priority=4, bestMonths=[9]),
        make_trip(name="Small", nights=2, priority=3, bestMonths=[3]),
    ]
    plan = build_year(2026, trips, ten_days)
    assert [rec.trip.name for rec in plan.recommendations] == ["Big", "Small"]
    assert plan.suggested_nights == 10
    assert plan.leave_left_after == 0


def test_greedy_is_not_optimal(make_trip, ten_days):
    # Two priority-4 trips would fill the year; the single priority-5 one wins
    trips = [
        make_trip(name="Top", nights=6, priority=5, bestMonths=[5]),
        make_trip(name="Pair A", nights=5, priority=4, bestMonths=[6]),
        make_trip(name="Pair B", nights=5, priority=4, bestMonths=[7]),
    ]
    plan = build_year(2026, trips, ten_days)
    assert [rec.trip.name for rec in plan.recommendations] == ["Top"]


def test_equal_scores_keep_pool_order(make_trip, ten_days):
    trips = [
        make_trip(name="First", nights=1, priority=3, bestMonths=[1]),
        make_trip(name="Second", nights=1, priority=3, bestMonths=[2]),
        make_trip(name="Third", nights=1, priority=3, bestMonths=[3]),
    ]
    plan = build_year(2026, trips, ten_days)
    assert [rec.trip.name for rec in plan.recommendations] == [
        "First",
        "Second",
        "Third",
    ]


def test_done_and_planned_trips_are_not_candidates(make_trip, ten_days):
    trips = [
        make_trip(name="Done", nights=2, status="Done"),
        make_trip(name="Elsewhere", nights=2, plannedYear=2030),
    ]
    plan = build_year(2026, trips, ten_days)
    assert plan.recommendations == []
    assert plan.reason == NO_UNPLANNED_TRIPS


def test_nothing_fits_budget(make_trip, ten_days):
    trips = [
        make_trip(nights=9, plannedYear=2026),
        make_trip(name="Too long", nights=4, priority=5),
    ]
    plan = build_year(2026, trips, ten_days)
    assert plan.recommendations == []
    assert plan.reason == NOTHING_FITS_BUDGET


def test_overcommitted_year_gets_nothing(make_trip, ten_days):
    trips = [
        make_trip(nights=12, plannedYear=2026),
        make_trip(name="Zero nights", nights=0, priority=5),
    ]
    plan = build_year(2026, trips, ten_days)
    assert plan.remaining_leave == -2
    assert plan.recommendations == []
    assert plan.reason == NOTHING_FITS_BUDGET


def test_build_year_is_idempotent(settings):
    trips = default_trips()
    first = build_year(2026, trips, settings)
    second = build_year(2026, trips, settings)
    assert [(r.trip.id, r.month, r.score) for r in first.recommendations] == [
        (r.trip.id, r.month, r.score) for r in second.recommendations
    ]


@pytest.mark.parametrize("leave", [0, 5, 12, 25, 40])
def test_suggestions_never_exceed_free_leave(leave):
    trips = default_trips()
    settings = PlannerSettings(annual_leave_days=leave)
    plan = build_year(2026, trips, settings)
    assert plan.suggested_nights <= max(plan.remaining_leave, 0)


def test_batch_can_double_up_months(make_trip, ten_days):
    # Only months already taken in the year are avoided; a batch may collide
    trips = [
        make_trip(name="A", nights=2, priority=5, bestMonths=[4]),
        make_trip(name="B", nights=2, priority=4, bestMonths=[4]),
    ]
    plan = build_year(2026, trips, ten_days)
    collisions = plan.month_collisions()
    assert list(collisions) == [4]
    assert [rec.trip.name for rec in collisions[4]] == ["A", "B"]


def test_accept_one(make_trip, ten_days):
    repo = TripRepository([make_trip(name="Short", nights=2, bestMonths=[5])])
    plan = build_year(2026, repo.all(), ten_days)

    trip = accept_one(repo, plan.recommendations[0], plan.year)

    assert trip.planned_year == 2026
    assert trip.planned_month == 5
    assert repo.unplanned() == []


def test_accept_all(make_trip, ten_days):
    repo = TripRepository(
        [
            make_trip(name="A", nights=3, costEstimate=1000, bestMonths=[4]),
            make_trip(name="B", nights=4, costEstimate=500, bestMonths=[]),
        ]
    )
    plan = build_year(2026, repo.all(), ten_days)

    accepted = accept_all(repo, plan)

    assert accepted.count == 2
    assert accepted.total_nights == 7
    assert accepted.total_cost == 1500
    assert {t.planned_year for t in repo.all()} == {2026}
    assert build_year(2026, repo.all(), ten_days).reason == NO_UNPLANNED_TRIPS
