"""
Planner service holding the application state.

Loads every piece of persisted state from its own key, applies user
mutations through the trip repository, and saves after each change. After
every trip mutation the achievement evaluator runs and newly unlocked
badges are stored with the rest.
"""

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from travel_bucket_list.config import PlannerConfig, config
from travel_bucket_list.data.defaults import default_trips
from travel_bucket_list.data.models import (
    PlannerSettings,
    SavingsState,
    Trip,
    TripStatus,
)
from travel_bucket_list.data.repository import TripRepository
from travel_bucket_list.data.storage import PlannerStateStore
from travel_bucket_list.services import achievements, insights, savings, scheduler
from travel_bucket_list.utils.logging import get_logger

logger = get_logger(__name__)

CELEBRATED_STATUSES = (TripStatus.BOOKED, TripStatus.DONE)


@dataclass
class TripChange:
    """Outcome of a trip mutation."""

    trip: Trip | None
    celebrate: bool = False
    new_achievements: list[str] = field(default_factory=list)


@dataclass
class _PendingDelete:
    trip: Trip
    deleted_at: float


class PlannerService:
    """
    Explicit state container for one user's bucket list.

    Args:
        state_store: Typed access to the persisted state
        planner_config: Configuration providing defaults and the undo window
        clock: Monotonic clock used for the undo window
    """

    def __init__(
        self,
        state_store: PlannerStateStore,
        planner_config: PlannerConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.state_store = state_store
        self.config = planner_config or config
        self._clock = clock

        self.repository = TripRepository()
        self.settings = self._default_settings()
        self.savings = self._default_savings()
        self.unlocked: list[str] = []
        self.dark_mode = False
        self._pending_delete: _PendingDelete | None = None

    # --- Loading ---

    def load(self) -> "PlannerService":
        """Load every piece of state, falling back to defaults."""
        stored_trips = self.state_store.load_trips()
        if stored_trips:
            self.repository = TripRepository(stored_trips)
        else:
            logger.info("No saved trips found; starting from the seed catalogue")
            self.repository = TripRepository(default_trips())

        self.settings = self.state_store.load_settings(self._default_settings())
        self.savings = self.state_store.load_savings(self._default_savings())
        self.unlocked = self.state_store.load_unlocked()
        self.dark_mode = self.state_store.load_dark_mode()

        logger.info(
            f"Loaded {len(self.repository)} trips, "
            f"{len(self.unlocked)} unlocked achievements"
        )
        return self

    @property
    def trips(self) -> list[Trip]:
        return self.repository.all()

    # --- Trip mutations ---

    def save_trip(self, data: Trip | Mapping[str, Any]) -> TripChange:
        """
        Save a trip from the edit form.

        Data carrying the id of an existing trip updates that trip; anything
        else is added as a new trip.
        """
        if isinstance(data, Trip):
            trip_id = data.id
            patch = data.model_dump()
        else:
            patch = dict(data)
            trip_id = patch.get("id")

        if trip_id is not None and trip_id in self.repository:
            return self.update_trip(trip_id, patch)

        trip = self.repository.add(data)
        return self._after_trip_change(trip)

    def update_trip(self, trip_id: int, patch: Mapping[str, Any]) -> TripChange:
        """Apply a patch; celebrates a move into Booked or Done."""
        before = self.repository.by_id(trip_id)
        trip = self.repository.update(trip_id, patch)
        if trip is None:
            return TripChange(trip=None)

        celebrate = (
            before.status != trip.status and trip.status in CELEBRATED_STATUSES
        )
        if celebrate:
            logger.info(f"Trip {trip.name!r} is now {trip.status.value}")
        return self._after_trip_change(trip, celebrate=celebrate)

    def delete_trip(self, trip_id: int) -> TripChange:
        """Delete a trip, keeping it restorable for the undo window."""
        trip = self.repository.remove(trip_id)
        if trip is None:
            return TripChange(trip=None)

        self._pending_delete = _PendingDelete(trip=trip, deleted_at=self._clock())
        return self._after_trip_change(trip)

    def undo_delete(self) -> TripChange:
        """Restore the last deleted trip if the undo window is still open."""
        pending = self._pending_delete
        self._pending_delete = None
        if pending is None:
            return TripChange(trip=None)

        elapsed = self._clock() - pending.deleted_at
        if elapsed > self.config.storage.undo_window_seconds:
            logger.debug(f"Undo window expired for trip {pending.trip.id}")
            return TripChange(trip=None)

        trip = self.repository.add(pending.trip)
        return self._after_trip_change(trip)

    @property
    def can_undo(self) -> bool:
        pending = self._pending_delete
        if pending is None:
            return False
        elapsed = self._clock() - pending.deleted_at
        return elapsed <= self.config.storage.undo_window_seconds

    def assign(self, trip_id: int, year: int, month: int | None = None) -> TripChange:
        trip = self.repository.assign(trip_id, year, month)
        if trip is None:
            return TripChange(trip=None)
        return self._after_trip_change(trip)

    def unassign(self, trip_id: int) -> TripChange:
        trip = self.repository.unassign(trip_id)
        if trip is None:
            return TripChange(trip=None)
        return self._after_trip_change(trip)

    def toggle_favourite(self, trip_id: int) -> TripChange:
        trip = self.repository.toggle_favourite(trip_id)
        if trip is None:
            return TripChange(trip=None)
        return self._after_trip_change(trip)

    def toggle_checklist_item(self, trip_id: int, index: int) -> TripChange:
        trip = self.repository.toggle_checklist_item(trip_id, index)
        if trip is None:
            return TripChange(trip=None)
        return self._after_trip_change(trip)

    # --- Scheduling ---

    def build_year(self, year: int) -> scheduler.YearPlan:
        return scheduler.build_year(year, self.trips, self.settings)

    def accept_recommendations(
        self, plan: scheduler.YearPlan
    ) -> tuple[scheduler.BatchAcceptance, list[str]]:
        """Accept a whole year plan, then save and check achievements once."""
        accepted = scheduler.accept_all(self.repository, plan)
        change = self._after_trip_change(None)
        return accepted, change.new_achievements

    def accept_recommendation(
        self, recommendation: scheduler.Recommendation, year: int
    ) -> TripChange:
        trip = scheduler.accept_one(self.repository, recommendation, year)
        if trip is None:
            return TripChange(trip=None)
        return self._after_trip_change(trip)

    # --- Settings, savings, display ---

    def update_settings(self, **changes: Any) -> PlannerSettings:
        self.settings = PlannerSettings.model_validate(
            {**self.settings.model_dump(), **changes}
        )
        self.state_store.save_settings(self.settings)
        return self.settings

    def update_savings(self, **changes: Any) -> SavingsState:
        self.savings = SavingsState.model_validate(
            {**self.savings.model_dump(), **changes}
        )
        self.state_store.save_savings(self.savings)
        return self.savings

    def set_dark_mode(self, enabled: bool) -> bool:
        self.dark_mode = bool(enabled)
        self.state_store.save_dark_mode(self.dark_mode)
        return self.dark_mode

    def savings_projection(
        self, today: date | None = None
    ) -> savings.SavingsProjection:
        return savings.project_for(self.trips, self.savings, today)

    def export_plan(self) -> str:
        return insights.export_plan(self.trips, self.config.defaults.traveller_label)

    # --- Helpers ---

    def _after_trip_change(
        self, trip: Trip | None, celebrate: bool = False
    ) -> TripChange:
        self.state_store.save_trips(self.trips)

        new_ids = achievements.evaluate(self.trips, self.unlocked)
        if new_ids:
            self.unlocked = [*self.unlocked, *new_ids]
            self.state_store.save_unlocked(self.unlocked)
            logger.info(f"Achievements unlocked: {', '.join(new_ids)}")

        return TripChange(trip=trip, celebrate=celebrate, new_achievements=new_ids)

    def _default_settings(self) -> PlannerSettings:
        defaults = self.config.defaults
        return PlannerSettings(
            annual_leave_days=defaults.annual_leave_days,
            timeline_start_year=defaults.timeline_start_year,
            timeline_end_year=defaults.timeline_end_year,
        )

    def _default_savings(self) -> SavingsState:
        defaults = self.config.defaults
        return SavingsState(
            total_saved=defaults.total_saved,
            monthly_saving=defaults.monthly_saving,
        )
