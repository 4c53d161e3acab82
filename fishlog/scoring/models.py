# ABOUTME: Data models for fishing predictions
# ABOUTME: Provides the scored, display-ready result for one forecast day

from dataclasses import dataclass
from datetime import date


@dataclass
class FishingPrediction:
    """Prediction for one forecast day"""
    date: date
    time_window: str     # e.g., "06:00 - 09:00"
    score: int           # 0-100
    conditions: str      # e.g., "Full moon phase, optimal temperature, ..."
    temperature_c: float  # Average of the day's max/min
    moon_phase: str
    pressure_mb: float

    def __post_init__(self):
        if not 0 <= self.score <= 100:
            raise ValueError(f"Score must be 0-100, got {self.score}")
