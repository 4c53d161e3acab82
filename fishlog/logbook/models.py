# ABOUTME: Data models for logged fishing trips and saved locations
# ABOUTME: Plain dataclasses serialized to and from the logbook JSON file

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Location:
    """A favourite fishing spot"""
    name: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    notes: Optional[str] = None
    id: str = field(default_factory=_new_id)
    created_at: str = field(default_factory=_now)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Location name is required")
        if self.latitude is not None and not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")
        if self.longitude is not None and not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.longitude}")

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Trip:
    """One logged fishing trip with its catch and the weather at the time"""
    trip_date: str           # "2025-06-14"
    trip_time: str           # "06:30"
    location_id: Optional[str] = None
    catch_species: Optional[str] = None
    catch_quantity: int = 0
    catch_size: Optional[float] = None     # cm
    catch_weight: Optional[float] = None   # kg
    weather_temp: Optional[float] = None   # °C
    weather_wind: Optional[float] = None   # km/h
    weather_pressure: Optional[float] = None  # hPa
    moon_phase: Optional[str] = None
    water_conditions: Optional[str] = None
    notes: Optional[str] = None
    id: str = field(default_factory=_new_id)
    created_at: str = field(default_factory=_now)

    def __post_init__(self):
        if self.catch_quantity < 0:
            raise ValueError(f"Catch quantity can't be negative, got {self.catch_quantity}")

    def to_dict(self) -> dict:
        return asdict(self)
