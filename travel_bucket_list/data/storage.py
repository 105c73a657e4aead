"""
Key/value persistence for planner state.

Each piece of state (trip list, settings, savings, unlocked achievements,
dark-mode flag) lives under its own key as a JSON document and has its own
lifecycle. Two backends implement the same ``load``/``save`` contract:

* ``load(key)`` returns the decoded value, or ``None`` when the key is
  absent or its content is malformed. It never raises.
* ``save(key, value)`` is best effort. Failures are logged and reported as
  ``False``; they are never raised to the caller.
"""

import json
import os
from typing import Any

from pydantic import ValidationError

from travel_bucket_list.data.models import PlannerSettings, SavingsState, Trip
from travel_bucket_list.utils.error_handling import (
    StorageError,
    handle_errors,
    with_retry,
)
from travel_bucket_list.utils.logging import get_logger

logger = get_logger(__name__)

TRIPS_KEY = "travel-bucket-list"
SETTINGS_KEY = "travel-bucket-list-settings"
SAVINGS_KEY = "travel-bucket-list-savings"
ACHIEVEMENTS_KEY = "travel-achievements"
DARK_MODE_KEY = "travel-dark-mode"


class JsonFileStore:
    """Store writing one ``<key>.json`` file per key under a directory."""

    def __init__(self, data_dir: str, retry_attempts: int = 3):
        self.data_dir = os.path.abspath(data_dir)
        self._write = with_retry(max_attempts=retry_attempts)(self._write_file)

    def _path(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{key}.json")

    def load(self, key: str) -> Any | None:
        """Load the value stored under key, or None if absent or unreadable."""
        path = self._path(key)
        if not os.path.exists(path):
            return None

        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, UnicodeDecodeError, ValueError, RecursionError) as e:
            logger.warning(f"Ignoring unreadable state for '{key}': {e!s}")
            return None

    @handle_errors(default_value=False, error_cls=StorageError)
    def save(self, key: str, value: Any) -> bool:
        """Persist value under key. Returns False if the write failed."""
        payload = json.dumps(value, ensure_ascii=False)
        self._write(key, payload)
        return True

    def _write_file(self, key: str, payload: str) -> None:
        os.makedirs(self.data_dir, exist_ok=True)
        path = self._path(key)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(payload)
        os.replace(tmp_path, path)


class MemoryStore:
    """In-process store that still round-trips values through JSON."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Any | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.warning(f"Ignoring unreadable state for '{key}': {e!s}")
            return None

    @handle_errors(default_value=False, error_cls=StorageError)
    def save(self, key: str, value: Any) -> bool:
        self._data[key] = json.dumps(value, ensure_ascii=False)
        return True

    def put_raw(self, key: str, raw: str) -> None:
        """Store raw text under key, bypassing JSON encoding."""
        self._data[key] = raw

    def keys(self) -> list[str]:
        return list(self._data)


class PlannerStateStore:
    """
    Typed access to the persisted planner state.

    Wraps a key/value store and converts between JSON documents and the
    domain models. Anything that cannot be understood is treated as absent,
    so callers fall back to their defaults.
    """

    def __init__(self, store: JsonFileStore | MemoryStore):
        self.store = store

    # --- Trips ---

    def load_trips(self) -> list[Trip] | None:
        """Load the trip list; None if absent or not a list."""
        value = self.store.load(TRIPS_KEY)
        if not isinstance(value, list):
            if value is not None:
                logger.warning("Stored trip list is not a list; ignoring it")
            return None

        trips: list[Trip] = []
        for entry in value:
            if not isinstance(entry, dict):
                logger.warning(f"Skipping malformed trip entry: {entry!r}")
                continue
            try:
                trips.append(Trip.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping malformed trip entry: {e!s}")
        return trips

    def save_trips(self, trips: list[Trip]) -> bool:
        return self.store.save(TRIPS_KEY, [trip.to_storage() for trip in trips])

    # --- Settings ---

    def load_settings(self, defaults: PlannerSettings) -> PlannerSettings:
        """Load settings merged over the given defaults."""
        return self._load_merged(SETTINGS_KEY, defaults)

    def save_settings(self, settings: PlannerSettings) -> bool:
        return self.store.save(SETTINGS_KEY, settings.to_storage())

    # --- Savings ---

    def load_savings(self, defaults: SavingsState) -> SavingsState:
        """Load the savings state merged over the given defaults."""
        return self._load_merged(SAVINGS_KEY, defaults)

    def save_savings(self, savings: SavingsState) -> bool:
        return self.store.save(SAVINGS_KEY, savings.to_storage())

    # --- Achievements ---

    def load_unlocked(self) -> list[str]:
        value = self.store.load(ACHIEVEMENTS_KEY)
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]

    def save_unlocked(self, unlocked: list[str]) -> bool:
        return self.store.save(ACHIEVEMENTS_KEY, list(unlocked))

    # --- Dark mode ---

    def load_dark_mode(self) -> bool:
        value = self.store.load(DARK_MODE_KEY)
        if isinstance(value, str):
            return value == "true"
        return value is True

    def save_dark_mode(self, enabled: bool) -> bool:
        return self.store.save(DARK_MODE_KEY, bool(enabled))

    # --- Helpers ---

    def _load_merged(self, key: str, defaults: Any) -> Any:
        value = self.store.load(key)
        if not isinstance(value, dict):
            return defaults.model_copy()

        try:
            return type(defaults).model_validate({**defaults.to_storage(), **value})
        except ValidationError as e:
            logger.warning(f"Ignoring malformed state for '{key}': {e!s}")
            return defaults.model_copy()
