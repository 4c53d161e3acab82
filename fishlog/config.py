# ABOUTME: Application configuration including weather provider and scoring settings
# ABOUTME: Loaded once at process start from the environment (and .env when present)

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Weather provider (weatherapi.com)
    WEATHER_API_KEY = os.getenv("WEATHER_API_KEY", "")
    WEATHER_API_BASE = os.getenv("WEATHER_API_BASE", "https://api.weatherapi.com/v1")

    # Forecast horizon in days - the provider's free tier allows 3, paid plans 7+
    FORECAST_DAYS = int(os.getenv("FORECAST_DAYS", "7"))

    # No retries, so this is the only bound on a slow provider
    REQUEST_TIMEOUT_SECONDS = int(os.getenv("REQUEST_TIMEOUT_SECONDS", "10"))

    # Used for predictions when current conditions can't be fetched
    DEFAULT_PRESSURE_MB = float(os.getenv("DEFAULT_PRESSURE_MB", "1013"))

    # Pressure is informational unless this is switched on
    PRESSURE_SCORING = os.getenv("PRESSURE_SCORING", "false").lower() == "true"

    # Trip and location logbook
    LOGBOOK_PATH = os.getenv("LOGBOOK_PATH", "fishlog.json")

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
