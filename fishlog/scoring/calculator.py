# ABOUTME: Core scoring calculation logic for fishing conditions
# ABOUTME: Converts a forecast day into a 0-100 score, a conditions summary and a time window

from typing import Optional

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

# Temperature sweet spot, °C (average of the day's max/min)
OPTIMAL_TEMP_MIN = 15
OPTIMAL_TEMP_MAX = 25

# Wind sweet spot, km/h (day max)
FAVORABLE_WIND_MIN = 10
FAVORABLE_WIND_MAX = 25
STRONG_WIND = 35

# Time windows by score tier
PRIME_WINDOW = "06:00 - 09:00"
EVENING_WINDOW = "17:00 - 20:00"
EARLY_WINDOW = "05:30 - 08:30"

# Phase label when no moon data is available
UNKNOWN_PHASE = "Unknown"


class FishingScoreCalculator:
    """Calculates 0-100 fishing suitability scores from daily weather"""

    def __init__(self, use_pressure: bool = False):
        # Pressure is informational unless explicitly switched on
        self.use_pressure = use_pressure

    def calculate_score(
        self,
        avg_temp: float,
        rain_chance: float,
        max_wind: float,
        moon_illumination: Optional[float],
        avg_humidity: float,
        pressure: Optional[float] = None
    ) -> int:
        """
        Calculate a fishing score (0-100) for one day.

        Additive point system on a base of 50. Every factor is scored on
        its own, so a perfect day overshoots 100 and gets clamped.

        Target scores:
        - 18°C, dry, 15km/h breeze, full moon: 100
        - 5°C, 90% rain, 50km/h gale, quarter moon: 35

        Args:
            avg_temp: Average of the day's max/min temperature (°C)
            rain_chance: Chance of rain (%)
            max_wind: Day's max wind speed (km/h)
            moon_illumination: Moon illumination (%), None if unknown
            avg_humidity: Average humidity (%)
            pressure: Atmospheric pressure (hPa), only scored when use_pressure is on

        Returns:
            Score from 0-100
        """
        score = float(BASE_SCORE)

        # Temperature
        if OPTIMAL_TEMP_MIN <= avg_temp <= OPTIMAL_TEMP_MAX:
            score += 20
        elif 10 <= avg_temp < OPTIMAL_TEMP_MIN or OPTIMAL_TEMP_MAX < avg_temp <= 30:
            score += 10

        # Rain
        if rain_chance < 30:
            score += 15
        elif rain_chance < 60:
            score += 5
        else:
            score -= 10

        # Wind
        if FAVORABLE_WIND_MIN <= max_wind <= FAVORABLE_WIND_MAX:
            score += 10
        elif max_wind > STRONG_WIND:
            score -= 15

        # Moon - fish feed hardest around full and new moon
        if moon_illumination is not None:
            if moon_illumination > 90 or moon_illumination < 10:
                score += 15
            elif 40 <= moon_illumination <= 60:
                score += 10

        # Humidity
        if 50 <= avg_humidity <= 80:
            score += 5

        if self.use_pressure and pressure is not None:
            if 1010 <= pressure <= 1020:
                score += 15
            elif 1005 <= pressure < 1010:
                score += 10

        return max(MIN_SCORE, min(MAX_SCORE, int(round(score))))

    def describe_conditions(
        self,
        avg_temp: float,
        rain_chance: float,
        max_wind: float,
        moon_phase: Optional[str]
    ) -> str:
        """
        Human-readable summary, e.g.
        "Full moon phase, optimal temperature, clear conditions, favorable wind"
        """
        parts = []

        if moon_phase and moon_phase != UNKNOWN_PHASE:
            if "Full" in moon_phase:
                parts.append("Full moon phase")
            elif "New" in moon_phase:
                parts.append("New moon phase")
            else:
                parts.append(f"{moon_phase} moon")

        if OPTIMAL_TEMP_MIN <= avg_temp <= OPTIMAL_TEMP_MAX:
            parts.append("optimal temperature")
        else:
            parts.append(f"{avg_temp:.1f}°C")

        if rain_chance < 30:
            parts.append("clear conditions")
        elif rain_chance < 60:
            parts.append("possible light rain")
        else:
            parts.append("rainy conditions")

        if FAVORABLE_WIND_MIN <= max_wind <= FAVORABLE_WIND_MAX:
            parts.append("favorable wind")
        elif max_wind > STRONG_WIND:
            parts.append("strong winds")

        return ", ".join(parts)

    def select_time_window(self, score: int) -> str:
        """Recommended fishing window for a score tier."""
        if score >= 80:
            return PRIME_WINDOW
        if score >= 60:
            return EVENING_WINDOW
        return EARLY_WINDOW


def rating_label(score: int) -> str:
    """Display label for a score: Excellent / Good / Fair / Poor."""
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Fair"
    return "Poor"
