# ABOUTME: Weather gateway for the weatherapi.com forecast endpoint
# ABOUTME: Normalizes provider JSON into CurrentWeather / ForecastDay, failures become None or []

import logging
from datetime import date
from typing import Optional

import requests

from fishlog.errors import ConfigError, FetchError
from fishlog.weather.descriptors import moon_phase_from_illumination, wind_name
from fishlog.weather.models import CurrentWeather, ForecastDay

log = logging.getLogger(__name__)

KINDS = ("current", "forecast", "predictions")
MIN_FORECAST_DAYS = 3
MAX_FORECAST_DAYS = 7

# Raised while reshaping a payload that is missing fields or has odd types
PARSE_ERRORS = (KeyError, IndexError, TypeError, ValueError, AttributeError)


class WeatherClient:
    """
    Client for current conditions and daily forecasts from weatherapi.com.

    Both kinds of request go to forecast.json, which returns the current
    block alongside the daily astro data (moon phase and illumination).
    """

    DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"

    def __init__(
        self,
        api_key: str,
        base_url: str = None,
        forecast_days: int = MAX_FORECAST_DAYS,
        timeout: int = 10
    ):
        if not api_key or not api_key.strip():
            raise ConfigError("Weather API key not configured (set WEATHER_API_KEY)")

        self.api_key = api_key
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.forecast_days = max(MIN_FORECAST_DAYS, min(MAX_FORECAST_DAYS, int(forecast_days)))
        self.timeout = timeout

    def build_params(self, lat: float, lon: float, kind: str) -> dict:
        """Query parameters for a request kind ("current", "forecast" or "predictions")."""
        if kind not in KINDS:
            raise ValueError(f"Unknown request kind: {kind}")

        return {
            "key": self.api_key,
            "q": f"{lat},{lon}",
            "days": 1 if kind == "current" else self.forecast_days,
            "aqi": "no",
        }

    def fetch(self, lat: float, lon: float, kind: str):
        """Fetch the normalized payload for a request kind."""
        if kind == "current":
            return self.fetch_current(lat, lon)
        return self.fetch_forecast(lat, lon, kind=kind)

    def fetch_current(self, lat: float, lon: float) -> Optional[CurrentWeather]:
        """
        Fetch current conditions.

        Returns:
            CurrentWeather on success, None on any fetch or parse error.
        """
        try:
            data = self._request(lat, lon, "current")
            return parse_current(data)
        except FetchError as e:
            log.error(f"Current weather fetch failed for {lat},{lon}: {e}")
            return None
        except PARSE_ERRORS as e:
            log.error(f"Current weather response parsing failed: {e}")
            return None

    def fetch_forecast(self, lat: float, lon: float, kind: str = "forecast") -> list[ForecastDay]:
        """
        Fetch the daily forecast over the configured horizon.

        Returns:
            List of ForecastDay in date order, empty on any fetch or parse error.
        """
        try:
            data = self._request(lat, lon, kind)
            return parse_forecast_days(data)
        except FetchError as e:
            log.error(f"Forecast fetch failed for {lat},{lon}: {e}")
            return []
        except PARSE_ERRORS as e:
            log.error(f"Forecast response parsing failed: {e}")
            return []

    def _request(self, lat: float, lon: float, kind: str) -> dict:
        """GET forecast.json, raising FetchError on network errors or non-2xx status."""
        url = f"{self.base_url}/forecast.json"
        params = self.build_params(lat, lon, kind)

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Weather API request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"Weather API HTTP error: {response.status_code} - {response.text}",
                status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"Weather API returned invalid JSON: {e}") from e


def parse_current(data: dict) -> CurrentWeather:
    """Reshape a forecast.json payload into CurrentWeather."""
    location = data["location"]
    current = data["current"]

    days = (data.get("forecast") or {}).get("forecastday") or [{}]
    astro = days[0].get("astro") or {}
    illumination = _to_percent(astro.get("moon_illumination"))
    moon_phase = astro.get("moon_phase") or _phase_or_unknown(illumination)

    wind_kph = float(current["wind_kph"])

    return CurrentWeather(
        location=f"{location['name']}, {location['country']}",
        temperature_c=float(current["temp_c"]),
        condition=current["condition"]["text"],
        wind_speed_kph=wind_kph,
        wind_direction=current.get("wind_dir", "N"),
        wind_name=wind_name(wind_kph),
        pressure_mb=float(current["pressure_mb"]),
        humidity_pct=float(current["humidity"]),
        moon_phase=moon_phase,
        moon_illumination=illumination,
    )


def parse_forecast_days(data: dict) -> list[ForecastDay]:
    """Reshape forecast.forecastday[] into ForecastDay rows."""
    result = []
    for entry in data["forecast"]["forecastday"]:
        day = entry["day"]
        astro = entry.get("astro") or {}
        illumination = _to_percent(astro.get("moon_illumination"))
        moon_phase = astro.get("moon_phase")
        if not moon_phase and illumination is not None:
            moon_phase = moon_phase_from_illumination(illumination)

        result.append(
            ForecastDay(
                date=date.fromisoformat(entry["date"]),
                max_temp_c=float(day["maxtemp_c"]),
                min_temp_c=float(day["mintemp_c"]),
                condition=day["condition"]["text"],
                chance_of_rain=float(day["daily_chance_of_rain"]),
                avg_humidity=float(day["avghumidity"]),
                max_wind_kph=float(day["maxwind_kph"]),
                moon_phase=moon_phase,
                moon_illumination=illumination,
                sunrise=astro.get("sunrise"),
                sunset=astro.get("sunset"),
            )
        )
    return result


def _to_percent(value) -> Optional[float]:
    """Illumination arrives as "95", 95 or not at all."""
    if value is None or value == "":
        return None
    return max(0.0, min(100.0, float(value)))


def _phase_or_unknown(illumination: Optional[float]) -> str:
    if illumination is None:
        return "Unknown"
    return moon_phase_from_illumination(illumination)
