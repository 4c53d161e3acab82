# ABOUTME: Main application orchestrator coordinating weather fetch and scoring
# ABOUTME: Exposes current weather, forecast and ranked fishing predictions to callers

import logging
from typing import Optional

from fishlog.config import Config
from fishlog.debug import debug_log
from fishlog.scoring.calculator import UNKNOWN_PHASE, FishingScoreCalculator
from fishlog.scoring.models import FishingPrediction
from fishlog.weather.client import WeatherClient
from fishlog.weather.models import CurrentWeather, ForecastDay

log = logging.getLogger(__name__)


class FishingOrchestrator:
    """Orchestrates the weather gateway and scorer to build predictions"""

    def __init__(self, api_key: str):
        self.weather_client = WeatherClient(
            api_key=api_key,
            base_url=Config.WEATHER_API_BASE,
            forecast_days=Config.FORECAST_DAYS,
            timeout=Config.REQUEST_TIMEOUT_SECONDS
        )
        self.score_calculator = FishingScoreCalculator(use_pressure=Config.PRESSURE_SCORING)

    def get_current_weather(self, lat: float, lon: float) -> Optional[CurrentWeather]:
        """Current conditions, or None when the provider is unavailable."""
        return self.weather_client.fetch_current(lat, lon)

    def get_weather_forecast(self, lat: float, lon: float) -> list[ForecastDay]:
        """Daily forecast, empty when the provider is unavailable."""
        return self.weather_client.fetch_forecast(lat, lon)

    def get_fishing_predictions(self, lat: float, lon: float) -> list[FishingPrediction]:
        """
        Fishing predictions sorted best first.

        Returns:
            Predictions by score descending, or [] when they are unavailable.
            An empty list never means "zero conditions".
        """
        return self.build_predictions(lat, lon)

    def build_predictions(self, lat: float, lon: float) -> list[FishingPrediction]:
        """
        Score every forecast day and rank them.

        Current conditions supply pressure and a fallback moon illumination.
        Ties keep chronological order (sorted() is stable).
        """
        days = self.weather_client.fetch_forecast(lat, lon, kind="predictions")
        if not days:
            log.info(f"No forecast days for {lat},{lon} - predictions unavailable")
            return []

        current = self.weather_client.fetch_current(lat, lon)
        if current is None:
            debug_log("Current weather unavailable, using default pressure", "PREDICTIONS")
            pressure = Config.DEFAULT_PRESSURE_MB
        else:
            pressure = current.pressure_mb

        predictions = [self._predict_day(day, current, pressure) for day in days]
        predictions = sorted(predictions, key=lambda p: p.score, reverse=True)

        log.info(
            f"Built {len(predictions)} predictions for {lat},{lon}: "
            f"best {predictions[0].date} ({predictions[0].score})"
        )
        return predictions

    def _predict_day(
        self,
        day: ForecastDay,
        current: Optional[CurrentWeather],
        pressure: float
    ) -> FishingPrediction:
        """Build the prediction for a single forecast day."""
        illumination = day.moon_illumination
        if illumination is None and current is not None:
            illumination = current.moon_illumination

        # The gateway already derives a phase from the day's own illumination
        moon_phase = day.moon_phase
        if not moon_phase:
            moon_phase = current.moon_phase if current is not None else UNKNOWN_PHASE

        avg_temp = day.avg_temp_c
        score = self.score_calculator.calculate_score(
            avg_temp=avg_temp,
            rain_chance=day.chance_of_rain,
            max_wind=day.max_wind_kph,
            moon_illumination=illumination,
            avg_humidity=day.avg_humidity,
            pressure=pressure
        )

        debug_log(f"{day.date}: avg {avg_temp:.1f}°C, moon {illumination}% -> {score}", "PREDICTIONS")

        return FishingPrediction(
            date=day.date,
            time_window=self.score_calculator.select_time_window(score),
            score=score,
            conditions=self.score_calculator.describe_conditions(
                avg_temp=avg_temp,
                rain_chance=day.chance_of_rain,
                max_wind=day.max_wind_kph,
                moon_phase=moon_phase
            ),
            temperature_c=avg_temp,
            moon_phase=moon_phase,
            pressure_mb=pressure
        )
