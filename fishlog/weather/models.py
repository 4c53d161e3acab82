# ABOUTME: Data models for current conditions and daily forecasts
# ABOUTME: Provider-neutral shapes produced fresh per request, never persisted

from dataclasses import dataclass
from datetime import date
from typing import Optional

from fishlog.weather.descriptors import wind_name


@dataclass
class CurrentWeather:
    """Current conditions at a location"""
    location: str            # "London, United Kingdom"
    temperature_c: float
    condition: str           # e.g., "Partly cloudy"
    wind_speed_kph: float
    wind_direction: str      # Compass: "N", "NNE", "NE", etc.
    wind_name: str           # e.g., "Gentle Breeze"
    pressure_mb: float
    humidity_pct: float
    moon_phase: str
    moon_illumination: Optional[float] = None  # 0-100

    def __str__(self) -> str:
        return (
            f"{self.location}: {self.temperature_c:.1f}°C {self.condition}, "
            f"Wind: {self.wind_speed_kph:.0f}km/h {self.wind_direction} ({self.wind_name}), "
            f"{self.pressure_mb:.0f}hPa"
        )


@dataclass
class ForecastDay:
    """One calendar day's weather summary, used as scoring input"""
    date: date
    max_temp_c: float
    min_temp_c: float
    condition: str
    chance_of_rain: float    # 0-100
    avg_humidity: float      # 0-100
    max_wind_kph: float
    moon_phase: Optional[str] = None
    moon_illumination: Optional[float] = None  # 0-100
    sunrise: Optional[str] = None  # "06:12 AM"
    sunset: Optional[str] = None

    def __post_init__(self):
        if not 0 <= self.chance_of_rain <= 100:
            raise ValueError(f"Rain chance must be 0-100, got {self.chance_of_rain}")
        if not 0 <= self.avg_humidity <= 100:
            raise ValueError(f"Humidity must be 0-100, got {self.avg_humidity}")
        if self.moon_illumination is not None and not 0 <= self.moon_illumination <= 100:
            raise ValueError(f"Moon illumination must be 0-100, got {self.moon_illumination}")

    @property
    def avg_temp_c(self) -> float:
        return (self.max_temp_c + self.min_temp_c) / 2

    @property
    def wind_name(self) -> str:
        return wind_name(self.max_wind_kph)
