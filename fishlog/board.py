# ABOUTME: Holds the predictions currently shown for a location
# ABOUTME: Latest request wins - results from cancelled or superseded requests are dropped

import logging
import threading
from typing import Optional

from fishlog.scoring.models import FishingPrediction

log = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Unable to fetch weather predictions. Please try again later."


class PredictionBoard:
    """
    Display state for the best-times view.

    Every request gets a ticket. Starting a new request or cancelling
    invalidates older tickets, so a slow earlier fetch can never
    overwrite the result of a faster later one.
    """

    def __init__(self, orchestrator):
        self.orchestrator = orchestrator
        self._lock = threading.Lock()
        self._ticket = 0
        self._pending: Optional[int] = None

        self.location: Optional[tuple[float, float]] = None
        self.predictions: list[FishingPrediction] = []
        self.message: Optional[str] = None

    def begin(self, lat: float, lon: float) -> int:
        """Start a request for a location, superseding any in-flight one."""
        with self._lock:
            self._ticket += 1
            self._pending = self._ticket
            self.location = (lat, lon)
            return self._ticket

    def cancel(self) -> None:
        """Drop the in-flight request, if any."""
        with self._lock:
            self._pending = None

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._pending

    def apply(self, ticket: int, predictions: list[FishingPrediction]) -> bool:
        """
        Store a request's result if it is still the current one.

        Returns:
            True if applied, False if the result was stale and discarded.
        """
        with self._lock:
            if ticket != self._pending:
                log.info(f"Discarding stale predictions for ticket {ticket}")
                return False

            self._pending = None
            self.predictions = list(predictions)
            self.message = None if predictions else UNAVAILABLE_MESSAGE
            return True

    def refresh(self, lat: float, lon: float) -> bool:
        """Fetch predictions for a location and show them unless superseded."""
        ticket = self.begin(lat, lon)
        predictions = self.orchestrator.get_fishing_predictions(lat, lon)
        return self.apply(ticket, predictions)

    @property
    def is_loading(self) -> bool:
        with self._lock:
            return self._pending is not None
