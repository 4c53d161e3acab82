# ABOUTME: Categorical labels derived from raw weather numbers
# ABOUTME: Beaufort-style wind names and moon phase names from illumination

# (exclusive upper bound in km/h, name) - anything faster is a hurricane
WIND_BANDS = [
    (1, "Calm"),
    (6, "Light Air"),
    (12, "Light Breeze"),
    (20, "Gentle Breeze"),
    (29, "Moderate Breeze"),
    (39, "Fresh Breeze"),
    (50, "Strong Breeze"),
    (62, "Near Gale"),
    (75, "Gale"),
    (89, "Strong Gale"),
    (103, "Storm"),
    (118, "Violent Storm"),
]
HURRICANE = "Hurricane"

MOON_PHASES = [
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
]
MOON_BAND_WIDTH = 100 / len(MOON_PHASES)


def wind_name(speed_kph: float) -> str:
    """Name for a wind speed, from "Calm" up to "Hurricane"."""
    for upper, name in WIND_BANDS:
        if speed_kph < upper:
            return name
    return HURRICANE


def moon_phase_from_illumination(illumination: float) -> str:
    """
    Moon phase name from illumination percentage.

    Splits [0, 100) into eight 12.5% bands in phase order. Exactly 100%
    folds back to "New Moon".
    """
    pct = max(0.0, min(100.0, float(illumination)))
    index = int(pct // MOON_BAND_WIDTH) % len(MOON_PHASES)
    return MOON_PHASES[index]
