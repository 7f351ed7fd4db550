"""
Persisted client state: preferences, the current recommendation lists and
the comparison list. Stored as one named JSON document and rewritten after
every mutation.
"""

import logging
import os
import threading
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from travelai.config import settings
from travelai.models.destination import Destination, TravelPreferences, TrendingDestination

logger = logging.getLogger(__name__)


class StoreState(BaseModel):
    preferences: Optional[TravelPreferences] = None
    destinations: List[Destination] = []
    trendingDestinations: List[TrendingDestination] = []
    compareList: List[Destination] = []


class TravelStore:
    def __init__(self, directory: Optional[str] = None, name: Optional[str] = None):
        self.path = os.path.join(directory or settings.store_dir, f"{name or settings.store_name}.json")
        self._lock = threading.Lock()
        self.state = self._load()

    def _load(self) -> StoreState:
        if not os.path.exists(self.path):
            return StoreState()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return StoreState.model_validate_json(f.read())
        except (OSError, ValidationError) as e:
            logger.warning(f"Could not load store from {self.path}, starting empty: {e}")
            return StoreState()

    def _save(self):
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(self.state.model_dump_json(indent=2))
        os.replace(tmp_path, self.path)

    def _update(self, **changes) -> StoreState:
        return self._apply(lambda state: changes)

    def _apply(self, updater: Callable[[StoreState], Optional[Dict[str, Any]]]) -> StoreState:
        """Compute changes from the current state and write them under one lock. `None` means no change."""
        with self._lock:
            changes = updater(self.state)
            if changes is None:
                return self.state
            self.state = self.state.model_copy(update=changes)
            self._save()
            return self.state

    def set_preferences(self, preferences: TravelPreferences) -> StoreState:
        return self._update(preferences=preferences)

    def set_destinations(self, destinations: List[Destination]) -> StoreState:
        return self._update(destinations=list(destinations))

    def set_trending_destinations(self, trending: List[TrendingDestination]) -> StoreState:
        return self._update(trendingDestinations=list(trending))

    def add_to_compare(self, destination: Destination) -> StoreState:
        """Append unless a destination with the same (name, country) is already listed."""
        def append(state: StoreState):
            if any(d.key() == destination.key() for d in state.compareList):
                return None
            return {"compareList": state.compareList + [destination]}
        return self._apply(append)

    def remove_from_compare(self, name: str, country: str) -> StoreState:
        return self._apply(lambda state: {
            "compareList": [d for d in state.compareList if d.key() != (name, country)]
        })

    def clear_all(self) -> StoreState:
        with self._lock:
            self.state = StoreState()
            self._save()
            return self.state


_store_instance = None

def get_store() -> TravelStore:
    global _store_instance
    if _store_instance is None:
        _store_instance = TravelStore()
    return _store_instance
