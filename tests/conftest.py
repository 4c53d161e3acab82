# ABOUTME: Shared fixtures for the FishLog test suite
# ABOUTME: Builds weatherapi.com-shaped payloads and mocked HTTP responses

from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest


def _forecast_day(day_date: date, overrides: dict) -> dict:
    astro = {
        "sunrise": overrides.get("sunrise", "05:45 AM"),
        "sunset": overrides.get("sunset", "08:55 PM"),
    }
    if overrides.get("moon_phase") is not None:
        astro["moon_phase"] = overrides["moon_phase"]
    if overrides.get("moon_illumination") is not None:
        astro["moon_illumination"] = str(overrides["moon_illumination"])

    return {
        "date": day_date.isoformat(),
        "day": {
            "maxtemp_c": overrides.get("max", 22.0),
            "mintemp_c": overrides.get("min", 14.0),
            "condition": {"text": overrides.get("condition", "Sunny")},
            "daily_chance_of_rain": overrides.get("rain", 20),
            "avghumidity": overrides.get("humidity", 65),
            "maxwind_kph": overrides.get("wind", 15.0),
        },
        "astro": astro,
    }


@pytest.fixture
def make_payload():
    """
    Factory for forecast.json payloads.

    Each day is a dict with optional keys max, min, rain, wind,
    humidity, moon_phase, moon_illumination, condition.
    """
    def _make(days=None, start=date(2025, 6, 14), pressure=1016.0, current_wind=14.4):
        days = days if days is not None else [{}]
        return {
            "location": {"name": "London", "region": "City of London", "country": "United Kingdom"},
            "current": {
                "temp_c": 17.0,
                "condition": {"text": "Partly cloudy"},
                "wind_kph": current_wind,
                "wind_dir": "WSW",
                "pressure_mb": pressure,
                "humidity": 63,
            },
            "forecast": {
                "forecastday": [
                    _forecast_day(start + timedelta(days=i), overrides) for i, overrides in enumerate(days)
                ]
            },
        }
    return _make


@pytest.fixture
def mock_response():
    """Factory for a requests.Response stand-in."""
    def _make(json_data=None, status_code=200, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        response.json.return_value = json_data
        return response
    return _make
