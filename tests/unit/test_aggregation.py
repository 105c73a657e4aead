"""Tests for the aggregation engine."""

from datetime import date

from travel_bucket_list.data.models import (
    Continent,
    PlannerSettings,
    TripCategory,
    TripStatus,
)
from travel_bucket_list.services import aggregation


def test_totals(sample_trips):
    totals = aggregation.totals(sample_trips)
    assert totals.count == 4
    assert totals.total_cost == 1200 + 6000 + 4500 + 1500
    assert totals.total_nights == 4 + 14 + 10 + 6
    assert totals.destinations == 4


def test_totals_treat_missing_values_as_zero(make_trip):
    trips = [make_trip(), make_trip(costEstimate=None, nights="")]
    totals = aggregation.totals(trips)
    assert totals.total_cost == 0
    assert totals.total_nights == 0
    assert totals.destinations == 1


def test_totals_empty():
    totals = aggregation.totals([])
    assert totals.count == 0
    assert totals.total_cost == 0


def test_by_status_includes_every_status(sample_trips):
    counts = aggregation.by_status(sample_trips)
    assert list(counts) == list(TripStatus)
    assert counts[TripStatus.DREAM] == 1
    assert counts[TripStatus.DONE] == 1


def test_by_category_most_common_first(sample_trips):
    counts = aggregation.by_category(sample_trips)
    assert next(iter(counts)) == TripCategory.ADVENTURE
    assert counts[TripCategory.ADVENTURE] == 2
    assert TripCategory.SKI not in counts


def test_cost_by_category_sorted(sample_trips):
    costs = aggregation.cost_by_category(sample_trips)
    assert dict(costs)[TripCategory.ADVENTURE] == 6000
    assert costs[0][1] == 6000
    assert costs[-1] == (TripCategory.FOOD_AND_WINE, 1200)
    assert [cost for _, cost in costs] == sorted(
        (cost for _, cost in costs), reverse=True
    )


def test_by_continent(sample_trips):
    counts = aggregation.by_continent(sample_trips)
    assert counts[Continent.EUROPE] == 2
    assert counts[Continent.ASIA] == 1
    assert counts[Continent.AFRICA] == 1


def test_by_planned_year_and_cost(sample_trips):
    assert aggregation.by_planned_year(sample_trips) == {2026: 1, 2027: 1}
    assert aggregation.cost_by_year(sample_trips) == [(2026, 1200), (2027, 6000)]


def test_best_month_histogram_counts_once_per_month(make_trip):
    trips = [make_trip(bestMonths=[1, 2, 3]), make_trip(bestMonths=[3])]
    histogram = aggregation.best_month_histogram(trips)
    assert list(histogram) == list(range(1, 13))
    assert histogram[1] == 1
    assert histogram[3] == 2
    assert histogram[12] == 0


def test_year_summary_overcommitted(make_trip):
    settings = PlannerSettings(annual_leave_days=10)
    trips = [
        make_trip(nights=7, plannedYear=2026, costEstimate=100),
        make_trip(nights=5, plannedYear=2026, costEstimate=200),
        make_trip(nights=9, plannedYear=2027),
    ]
    summary = aggregation.year_summary(2026, trips, settings)
    assert summary.total_nights == 12
    assert summary.total_cost == 300
    assert summary.is_overcommitted
    assert summary.remaining_leave == -2
    assert aggregation.overcommitted_years(trips, settings) == [2026]


def test_year_summaries_cover_timeline(sample_trips, settings):
    summaries = aggregation.year_summaries(sample_trips, settings)
    assert [s.year for s in summaries] == [2025, 2026, 2027, 2028]
    assert summaries[0].trips == []


def test_budget_stats(sample_trips):
    stats = aggregation.budget_stats(sample_trips)
    assert stats.total_budget == 13200
    assert stats.planned_budget == 7200
    assert stats.booked_cost == 7500
    assert stats.average_per_trip == 3300
    assert stats.average_per_night == 388
    assert stats.most_expensive.name == "Japan"
    assert stats.cheapest.name == "Tuscany"
    assert stats.top_category == TripCategory.ADVENTURE


def test_budget_stats_empty():
    stats = aggregation.budget_stats([])
    assert stats.total_budget == 0
    assert stats.most_expensive is None
    assert stats.average_per_night == 0


def test_in_season_skips_done_and_sorts(sample_trips):
    march = aggregation.in_season(sample_trips, 3)
    assert [trip.name for trip in march] == ["Japan"]
    april = aggregation.in_season(sample_trips, 4)
    assert [trip.name for trip in april] == ["Tuscany"]


def test_next_booked(make_trip):
    trips = [
        make_trip(name="Later", status="Booked", plannedYear=2027, plannedMonth=5),
        make_trip(name="Sooner", status="Booked", plannedYear=2026, plannedMonth=12),
        make_trip(name="No month", status="Booked", plannedYear=2026),
        make_trip(name="Planning", status="Planning", plannedYear=2026, plannedMonth=1),
    ]
    result = aggregation.next_booked(trips, today=date(2026, 11, 20))
    assert result.trip.name == "Sooner"
    assert result.days_until == 11


def test_next_booked_never_negative(make_trip):
    trips = [make_trip(status="Booked", plannedYear=2026, plannedMonth=3)]
    result = aggregation.next_booked(trips, today=date(2026, 3, 15))
    assert result.days_until == 0


def test_next_booked_none(sample_trips):
    assert aggregation.next_booked(sample_trips[:1], today=date(2026, 1, 1)) is None


def test_timeline_slots(make_trip):
    trips = [
        make_trip(name="A", plannedYear=2027, plannedMonth=2),
        make_trip(name="B", plannedYear=2026),
        make_trip(name="C", plannedYear=2026, plannedMonth=6),
        make_trip(name="D", plannedYear=2026, plannedMonth=6),
        make_trip(name="E"),
    ]
    slots = aggregation.timeline_slots(trips)
    assert [(s.year, s.month) for s in slots] == [(2026, 6), (2026, None), (2027, 2)]
    assert [t.name for t in slots[0].trips] == ["C", "D"]


def test_next_booked_ignores_years_outside_calendar(make_trip):
    trips = [
        make_trip(name="Far", status="Booked", plannedYear=12000, plannedMonth=1),
        make_trip(name="Near", status="Booked", plannedYear=2027, plannedMonth=1),
    ]
    result = aggregation.next_booked(trips, today=date(2026, 1, 1))
    assert result.trip.name == "Near"
