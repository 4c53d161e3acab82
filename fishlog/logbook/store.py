# ABOUTME: JSON file store for trips and locations
# ABOUTME: Single persistence backend behind save/get/delete, last write wins

import json
import logging
import threading
from pathlib import Path
from typing import Optional

from fishlog.logbook.models import Location, Trip

log = logging.getLogger(__name__)


class LogbookStore:
    """
    Trips and locations kept in one JSON file.

    The whole file is rewritten on every save or delete. Concurrent
    writers are not coordinated beyond this process - the last write wins.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    # ==================== Trips ====================

    def save_trip(self, trip: Trip) -> Trip:
        """Insert or replace a trip by id."""
        with self._lock:
            data = self._load()
            data["trips"][trip.id] = trip.to_dict()
            self._write(data)
        return trip

    def get_trips(self) -> list[Trip]:
        """All trips, newest first."""
        data = self._load()
        trips = [Trip(**row) for row in data["trips"].values()]
        return sorted(trips, key=lambda t: (t.trip_date, t.trip_time), reverse=True)

    def get_trip(self, trip_id: str) -> Optional[Trip]:
        row = self._load()["trips"].get(trip_id)
        return Trip(**row) if row else None

    def delete_trip(self, trip_id: str) -> bool:
        """Delete a trip. Returns False if it didn't exist."""
        with self._lock:
            data = self._load()
            if data["trips"].pop(trip_id, None) is None:
                return False
            self._write(data)
        return True

    def get_species(self) -> list[str]:
        """Distinct species caught across all trips, sorted."""
        return sorted({t.catch_species for t in self.get_trips() if t.catch_species})

    # ==================== Locations ====================

    def save_location(self, location: Location) -> Location:
        """Insert or replace a location by id."""
        with self._lock:
            data = self._load()
            data["locations"][location.id] = location.to_dict()
            self._write(data)
        return location

    def get_locations(self) -> list[Location]:
        """All locations, sorted by name."""
        data = self._load()
        locations = [Location(**row) for row in data["locations"].values()]
        return sorted(locations, key=lambda loc: loc.name.lower())

    def get_location(self, location_id: str) -> Optional[Location]:
        row = self._load()["locations"].get(location_id)
        return Location(**row) if row else None

    def delete_location(self, location_id: str) -> bool:
        """Delete a location. Trips that referenced it keep the dangling id."""
        with self._lock:
            data = self._load()
            if data["locations"].pop(location_id, None) is None:
                return False
            self._write(data)
        return True

    # ==================== File I/O ====================

    def _load(self) -> dict:
        if not self.path.exists():
            return {"trips": {}, "locations": {}}

        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)

        data.setdefault("trips", {})
        data.setdefault("locations", {})
        return data

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        tmp_path.replace(self.path)
        log.debug(f"Logbook written: {len(data['trips'])} trips, {len(data['locations'])} locations")
