"""
Pytest configuration for the Travel Bucket List planner tests.
"""

import pytest

from travel_bucket_list.config import (
    DefaultsConfig,
    PlannerConfig,
    StorageConfig,
    SystemConfig,
)
from travel_bucket_list.data.models import PlannerSettings, SavingsState, Trip
from travel_bucket_list.data.storage import MemoryStore, PlannerStateStore
from travel_bucket_list.utils import LogLevel, setup_logging


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    setup_logging(LogLevel.DEBUG)


@pytest.fixture
def make_trip():
    """Factory for trips with sensible defaults and sequential ids."""
    counter = {"next": 1}

    def _make(**fields):
        if "id" not in fields:
            fields["id"] = counter["next"]
            counter["next"] += 1
        fields.setdefault("name", f"Trip {fields['id']}")
        fields.setdefault("destination", "Portugal")
        return Trip.model_validate(fields)

    return _make


@pytest.fixture
def sample_trips(make_trip):
    """A small collection covering every status and a few planned trips."""
    return [
        make_trip(
            name="Tuscany",
            destination="Tuscany, Italy",
            status="Planning",
            category="Food & Wine",
            costEstimate=1200,
            nights=4,
            bestMonths=[4, 9],
            priority=5,
            plannedYear=2026,
            plannedMonth=4,
        ),
        make_trip(
            name="Japan",
            destination="Japan",
            status="Booked",
            category="Cultural",
            costEstimate=6000,
            nights=14,
            bestMonths=[3, 10],
            priority=5,
            plannedYear=2027,
            plannedMonth=3,
        ),
        make_trip(
            name="Iceland",
            destination="Iceland",
            category="Adventure",
            costEstimate=4500,
            nights=10,
            bestMonths=[6, 7],
            priority=4,
        ),
        make_trip(
            name="Morocco",
            destination="Morocco",
            status="Done",
            category="Adventure",
            costEstimate=1500,
            nights=6,
            bestMonths=[3, 4],
            priority=3,
        ),
    ]


@pytest.fixture
def settings():
    return PlannerSettings(
        annual_leave_days=25, timeline_start_year=2025, timeline_end_year=2028
    )


@pytest.fixture
def savings():
    return SavingsState(total_saved=1000, monthly_saving=500)


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def state_store(memory_store):
    return PlannerStateStore(memory_store)


@pytest.fixture
def test_config(tmp_path):
    """Configuration independent of the process environment."""
    return PlannerConfig(
        system=SystemConfig(log_level=LogLevel.DEBUG, environment="test"),
        storage=StorageConfig(data_dir=str(tmp_path), undo_window_seconds=5.0),
        defaults=DefaultsConfig(
            annual_leave_days=25,
            timeline_start_year=2025,
            timeline_end_year=2035,
            total_saved=0,
            monthly_saving=500,
            traveller_label="Sam & Alex",
        ),
    )
