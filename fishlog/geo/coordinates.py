"""
Coordinate conversion utilities for FishLog.

Converts between decimal degrees (how locations are stored) and the
degrees/decimal-minutes display format anglers read off a chart plotter.
Display format: 40°42.768′N, 74°0.360′W
"""

import math
import re

from fishlog.errors import ParseError

# Whitespace is stripped before matching, so this only sees the tokens
_DISPLAY_PATTERN = re.compile(r"^(\d+)°(\d+(?:\.\d*)?)[′'’]?([NSEW])?$")


def to_display(decimal: float, is_longitude: bool) -> str:
    """
    Convert decimal degrees to the DD°MM.MMM′H display string.

    Args:
        decimal: Decimal degrees (e.g., 40.7128 or -74.0060)
        is_longitude: True for longitude (E/W), False for latitude (N/S)

    Returns:
        Formatted string like "40°42.768′N" or "74°0.360′W"

    Examples:
        to_display(40.7128, False)  -> "40°42.768′N"
        to_display(-74.0060, True)  -> "74°0.360′W"
    """
    if is_longitude:
        direction = "E" if decimal >= 0 else "W"
    else:
        direction = "N" if decimal >= 0 else "S"

    absolute = abs(decimal)
    degrees = math.floor(absolute)
    minutes = round((absolute - degrees) * 60, 3)

    # 59.9996 rounds to 60.000, which would not parse back
    if minutes >= 60:
        degrees += 1
        minutes = 0.0

    return f"{degrees}°{minutes:.3f}′{direction}"


def parse_display(text: str) -> float:
    """
    Parse a DD°MM.MMM′H string to decimal degrees.

    Accepts an ASCII apostrophe in place of the prime mark, whitespace
    between tokens and lower-case hemisphere letters.

    Raises:
        ParseError: if the string doesn't match, minutes >= 60 or the
            hemisphere letter is missing
    """
    cleaned = re.sub(r"\s+", "", text or "").upper()
    match = _DISPLAY_PATTERN.match(cleaned)
    if not match:
        raise ParseError(f"Expected a coordinate like 40°42.768′N, got {text!r}")

    degrees = int(match.group(1))
    minutes = float(match.group(2))
    direction = match.group(3)

    if direction is None:
        raise ParseError("Missing hemisphere letter (N, S, E or W)")
    if minutes >= 60:
        raise ParseError("Minutes must be less than 60")

    decimal = degrees + minutes / 60
    if direction in ("S", "W"):
        decimal = -decimal
    return decimal


def from_display(text: str) -> float | None:
    """Parse a display string, returning None when it isn't parseable."""
    try:
        return parse_display(text)
    except ParseError:
        return None


def is_valid_display(text: str) -> bool:
    """True if from_display() would succeed - used for inline form validation."""
    return from_display(text) is not None


def display_error(text: str) -> str | None:
    """Validation message for a form field, or None if the value is valid."""
    try:
        parse_display(text)
    except ParseError as e:
        return str(e)
    return None


def format_coordinates(lat: float, lon: float) -> dict[str, str]:
    """
    Format a lat/lon pair for display.

    Returns:
        {"latitude": "51°30.000′N", "longitude": "0°5.400′W"}
    """
    return {
        "latitude": to_display(lat, is_longitude=False),
        "longitude": to_display(lon, is_longitude=True),
    }
