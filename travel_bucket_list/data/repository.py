"""
In-memory trip repository.

Owns the ordered trip collection and every mutation made to it. Unknown ids
are never an error: ``update``/``remove`` on a missing trip do nothing and
return ``None``, so callers check existence themselves when it matters.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from travel_bucket_list.data.models import (
    ChecklistItem,
    Trip,
    TripCategory,
    TripStatus,
)
from travel_bucket_list.utils.helpers import generate_trip_id
from travel_bucket_list.utils.logging import ServiceLogger

# Persisted camelCase name -> model attribute name
_ALIASES = {
    field.alias: name for name, field in Trip.model_fields.items() if field.alias
}


class TripRepository:
    """Ordered, in-memory collection of trips keyed by id."""

    def __init__(self, trips: Iterable[Trip | Mapping[str, Any]] | None = None):
        self._trips: list[Trip] = []
        self.log = ServiceLogger("trip_repository")
        for trip in trips or []:
            self.add(trip)

    # --- CRUD ---

    def add(self, trip: Trip | Mapping[str, Any]) -> Trip:
        """
        Add a trip, assigning a fresh id when it has none.

        A trip whose id is already taken is treated as new and given a
        fresh id rather than overwriting the existing record.

        Args:
            trip: A Trip or a raw mapping of (possibly unclean) form values

        Returns:
            The stored trip
        """
        if not isinstance(trip, Trip):
            trip = Trip.model_validate(dict(trip))

        existing_ids = self._ids()
        if trip.id is None or trip.id in existing_ids:
            trip = trip.model_copy(update={"id": generate_trip_id(existing_ids)})

        self._trips.append(trip)
        self.log.log_mutation("add", trip.id, name=trip.name)
        return trip

    def update(self, trip_id: int, patch: Mapping[str, Any]) -> Trip | None:
        """
        Merge a patch into an existing trip, re-coercing every field.

        Args:
            trip_id: Id of the trip to change
            patch: Field values keyed by attribute or camelCase name; an
                ``id`` entry is ignored

        Returns:
            The updated trip, or None if no trip has that id
        """
        index = self._index_of(trip_id)
        if index is None:
            return None

        current = self._trips[index]
        merged = current.model_dump()
        for key, value in patch.items():
            name = _ALIASES.get(key, key)
            if name == "id" or name not in Trip.model_fields:
                continue
            merged[name] = value
        merged["id"] = current.id

        updated = Trip.model_validate(merged)
        self._trips[index] = updated
        self.log.log_mutation("update", trip_id, fields=sorted(patch))
        return updated

    def remove(self, trip_id: int) -> Trip | None:
        """Remove a trip and return it; None if no trip has that id."""
        index = self._index_of(trip_id)
        if index is None:
            return None
        removed = self._trips.pop(index)
        self.log.log_mutation("remove", trip_id)
        return removed

    def all(self) -> list[Trip]:
        return list(self._trips)

    def by_id(self, trip_id: int) -> Trip | None:
        index = self._index_of(trip_id)
        return None if index is None else self._trips[index]

    def __len__(self) -> int:
        return len(self._trips)

    def __iter__(self):
        return iter(list(self._trips))

    def __contains__(self, trip_id: object) -> bool:
        return any(trip.id == trip_id for trip in self._trips)

    # --- Timeline ---

    def assign(
        self, trip_id: int, year: int, month: int | None = None
    ) -> Trip | None:
        """Place a trip on the timeline (month optional)."""
        return self.update(trip_id, {"planned_year": year, "planned_month": month})

    def unassign(self, trip_id: int) -> Trip | None:
        """Send a trip back to the unplanned pool."""
        return self.update(trip_id, {"planned_year": None, "planned_month": None})

    def planned(self) -> list[Trip]:
        return [trip for trip in self._trips if trip.is_planned]

    def unplanned(self) -> list[Trip]:
        return [trip for trip in self._trips if not trip.is_planned]

    # --- Small toggles ---

    def toggle_favourite(self, trip_id: int) -> Trip | None:
        trip = self.by_id(trip_id)
        if trip is None:
            return None
        return self.update(trip_id, {"favourite": not trip.favourite})

    def toggle_checklist_item(self, trip_id: int, index: int) -> Trip | None:
        """
        Flip one checklist entry, materializing the default checklist first.

        An out-of-range index leaves the trip unchanged.
        """
        trip = self.by_id(trip_id)
        if trip is None:
            return None

        checklist = trip.effective_checklist()
        if not 0 <= index < len(checklist):
            return trip

        checklist[index] = ChecklistItem(
            item=checklist[index].item, done=not checklist[index].done
        )
        return self.update(
            trip_id, {"checklist": [entry.model_dump() for entry in checklist]}
        )

    # --- Querying ---

    def filter(
        self,
        status: TripStatus | str | None = None,
        category: TripCategory | str | None = None,
        favourites_only: bool = False,
    ) -> list[Trip]:
        """
        Trips matching every given criterion. ``None`` or ``"All"`` means no
        constraint on that field.
        """
        result = []
        for trip in self._trips:
            if status not in (None, "All") and trip.status != status:
                continue
            if category not in (None, "All") and trip.category != category:
                continue
            if favourites_only and not trip.favourite:
                continue
            result.append(trip)
        return result

    # --- Serialization ---

    def to_json_list(self) -> list[dict[str, Any]]:
        return [trip.to_storage() for trip in self._trips]

    @classmethod
    def from_json_list(cls, data: Iterable[Mapping[str, Any]]) -> "TripRepository":
        return cls(data)

    # --- Helpers ---

    def _ids(self) -> set[int]:
        return {trip.id for trip in self._trips if trip.id is not None}

    def _index_of(self, trip_id: int) -> int | None:
        for index, trip in enumerate(self._trips):
            if trip.id == trip_id:
                return index
        return None


def sort_trips(trips: Iterable[Trip], key: str = "priority") -> list[Trip]:
    """
    Sort trips the way the card view offers.

    Keys: ``priority`` (high first), ``cost`` (cheap first), ``name``
    (alphabetical, case-insensitive), ``nights`` (long first). Any other key
    keeps the incoming order. The sort is stable.
    """
    trips = list(trips)
    if key == "priority":
        return sorted(trips, key=lambda t: t.priority, reverse=True)
    if key == "cost":
        return sorted(trips, key=lambda t: t.cost_estimate)
    if key == "name":
        return sorted(trips, key=lambda t: t.name.casefold())
    if key == "nights":
        return sorted(trips, key=lambda t: t.nights, reverse=True)
    return trips
