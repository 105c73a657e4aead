"""
Continent classification and flight-time estimates.

Classification is a heuristic for grouping and badges, not a geographic
authority. Destination text is matched against keyword patterns first, in a
fixed continent precedence; coordinates are only consulted when no keyword
matches. The rule order below must not change, since several keyword sets
could overlap on unusual destination strings.
"""

import math
import re
from collections.abc import Iterable

from travel_bucket_list.data.models import CONTINENT_ORDER, Continent, Trip
from travel_bucket_list.utils.helpers import round_half_up

EARTH_RADIUS_KM = 6371
LONDON = (51.51, -0.13)
CRUISE_SPEED_KMH = 800
MIN_FLIGHT_DISTANCE_KM = 200

_KEYWORD_RULES: list[tuple[Continent, re.Pattern[str]]] = [
    (Continent.ANTARCTICA, re.compile(r"antarctica")),
    (Continent.OCEANIA, re.compile(r"new zealand|australia|fiji|samoa")),
    (
        Continent.EUROPE,
        re.compile(
            r"italy|france|spain|portugal|croatia|norway|denmark|sweden|iceland"
            r"|switzerland|greece|hungary|austria|turkey|scotland|\buk\b|ireland"
            r"|faroe|germany|netherlands|belgium|czech|poland|finland"
        ),
    ),
    (
        Continent.ASIA,
        re.compile(
            r"japan|vietnam|maldives|sri lanka|indonesia|bali|south korea"
            r"|thailand|cambodia|india|borneo|china|nepal|oman|jordan"
            r"|philippines|malaysia|singapore"
        ),
    ),
    (
        Continent.AFRICA,
        re.compile(
            r"morocco|south africa|tanzania|rwanda|namibia|kenya|egypt"
            r"|ethiopia|madagascar|botswana"
        ),
    ),
    (
        Continent.AMERICAS,
        re.compile(
            r"usa|canada|argentin|peru|costa rica|antigua|colombia|mexico"
            r"|ecuador|brazil|chile|cuba|panama"
        ),
    ),
    (Continent.EUROPE, re.compile(r"lapland")),
]


def _classify_text(text: str) -> Continent | None:
    lowered = text.lower()
    for continent, pattern in _KEYWORD_RULES:
        if pattern.search(lowered):
            return continent
    return None


def _classify_coordinates(lat: float | None, lng: float | None) -> Continent:
    # No usable position (missing, or 0/0) counts as Europe
    if not lat and not lng:
        return Continent.EUROPE

    lat = lat or 0.0
    lng = lng or 0.0
    if lat < -60:
        return Continent.ANTARCTICA
    if lng > 100 and lat < 0:
        return Continent.OCEANIA
    if lat > 35 and -25 < lng < 45:
        return Continent.EUROPE
    if lng < -25:
        return Continent.AMERICAS
    if lng > 25 and lat > 0:
        return Continent.ASIA
    return Continent.AFRICA


def classify(trip: Trip) -> Continent:
    """
    Bucket a trip into one of six continents.

    The destination text is used, or the trip name when the destination is
    blank. Without a keyword hit the coordinates decide; a trip with no
    coordinates at all lands in Europe.
    """
    text = trip.destination or trip.name or ""
    continent = _classify_text(text)
    if continent is not None:
        return continent
    return _classify_coordinates(trip.lat, trip.lng)


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points (haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def flight_hours_from_london(trip: Trip) -> float | None:
    """
    Rough flight time from London at cruise speed, to the nearest half hour.

    Returns None when the trip lacks coordinates or is within 200 km of
    London (too close to count as a flight).
    """
    if trip.lat is None or trip.lng is None:
        return None

    distance = distance_km(LONDON[0], LONDON[1], trip.lat, trip.lng)
    if distance < MIN_FLIGHT_DISTANCE_KM:
        return None
    return round_half_up(distance / CRUISE_SPEED_KMH * 2) / 2


def group_by_continent(trips: Iterable[Trip]) -> dict[Continent, list[Trip]]:
    """Group trips by continent in display order, omitting empty groups."""
    groups: dict[Continent, list[Trip]] = {}
    for trip in trips:
        groups.setdefault(classify(trip), []).append(trip)
    return {
        continent: groups[continent]
        for continent in CONTINENT_ORDER
        if continent in groups
    }
