"""Tests for continent classification and flight-time estimates."""

import pytest

from travel_bucket_list.data.defaults import default_trips
from travel_bucket_list.data.models import CONTINENT_ORDER, Continent
from travel_bucket_list.services.geo import (
    classify,
    distance_km,
    flight_hours_from_london,
    group_by_continent,
)


@pytest.mark.parametrize(
    "destination,expected",
    [
        ("Tuscany, Italy", Continent.EUROPE),
        ("Japan", Continent.ASIA),
        ("Scotland, UK", Continent.EUROPE),
        ("New York, USA", Continent.AMERICAS),
        ("Patagonia, Argentina", Continent.AMERICAS),
        ("South Africa", Continent.AFRICA),
        ("New Zealand", Continent.OCEANIA),
        ("Antarctica", Continent.ANTARCTICA),
        ("Finnish Lapland", Continent.EUROPE),
        ("Jordan", Continent.ASIA),
    ],
)
def test_classify_by_keyword(make_trip, destination, expected):
    # Coordinates deliberately point elsewhere; the keyword must win
    trip = make_trip(destination=destination, lat=-33.9, lng=151.2)
    assert classify(trip) == expected


def test_keyword_match_is_case_insensitive(make_trip):
    assert classify(make_trip(destination="JAPAN")) == Continent.ASIA


def test_name_used_when_destination_blank(make_trip):
    trip = make_trip(name="Road trip in Canada", destination="")
    assert classify(trip) == Continent.AMERICAS


@pytest.mark.parametrize(
    "lat,lng,expected",
    [
        (-70.0, 10.0, Continent.ANTARCTICA),
        (-30.0, 150.0, Continent.OCEANIA),
        (40.0, 10.0, Continent.EUROPE),
        (10.0, -60.0, Continent.AMERICAS),
        (20.0, 80.0, Continent.ASIA),
        (5.0, 20.0, Continent.AFRICA),
    ],
)
def test_classify_by_coordinates(make_trip, lat, lng, expected):
    trip = make_trip(destination="Unknown spot", lat=lat, lng=lng)
    assert classify(trip) == expected


def test_no_keyword_and_no_coordinates_is_europe(make_trip):
    trip = make_trip(destination="Unknown spot")
    assert classify(trip) == Continent.EUROPE


def test_distance_is_symmetric():
    there = distance_km(51.51, -0.13, 64.96, -19.02)
    back = distance_km(64.96, -19.02, 51.51, -0.13)
    assert there == pytest.approx(back)
    assert 1800 < there < 1900


def test_flight_hours_iceland(make_trip):
    trip = make_trip(destination="Iceland", lat=64.96, lng=-19.02)
    first = flight_hours_from_london(trip)
    assert first == 2.5
    assert flight_hours_from_london(trip) == first


def test_flight_hours_none_without_coordinates(make_trip):
    assert flight_hours_from_london(make_trip()) is None
    assert flight_hours_from_london(make_trip(lat=48.85)) is None


def test_flight_hours_on_the_equator(make_trip):
    kampala = make_trip(destination="Kampala", lat=0.0, lng=32.58)
    assert flight_hours_from_london(kampala) == 8.0


def test_zero_zero_position_counts_as_europe(make_trip):
    assert classify(make_trip(destination="Unknown spot", lat=0, lng=0)) == (
        Continent.EUROPE
    )


def test_flight_hours_none_when_close(make_trip):
    oxford = make_trip(destination="Oxford, UK", lat=51.75, lng=-1.26)
    assert flight_hours_from_london(oxford) is None


def test_flight_hours_are_half_hour_multiples():
    for trip in default_trips():
        hours = flight_hours_from_london(trip)
        if hours is None:
            continue
        assert hours >= 0
        assert (hours * 2).is_integer()


def test_group_by_continent_order():
    groups = group_by_continent(default_trips())
    order = [CONTINENT_ORDER.index(continent) for continent in groups]
    assert order == sorted(order)
    assert all(groups.values())
    assert sum(len(trips) for trips in groups.values()) == 55
