# ABOUTME: CSV export of logged trips
# ABOUTME: One row per trip with the location resolved to its name

import csv
from datetime import date
from typing import Optional, TextIO

from fishlog.logbook.store import LogbookStore

HEADERS = [
    "Date",
    "Time",
    "Location",
    "Species",
    "Quantity",
    "Size (cm)",
    "Weight (kg)",
    "Temperature (°C)",
    "Wind Speed (km/h)",
    "Pressure (hPa)",
    "Moon Phase",
    "Water Conditions",
    "Notes",
]

MISSING = "N/A"


def export_trips_csv(store: LogbookStore, out: TextIO) -> int:
    """
    Write all trips as CSV to a text stream.

    Returns:
        Number of trip rows written

    Raises:
        ValueError: if there are no trips to export
    """
    trips = store.get_trips()
    if not trips:
        raise ValueError("No trips to export")

    location_names = {loc.id: loc.name for loc in store.get_locations()}

    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(HEADERS)

    for trip in trips:
        if trip.location_id:
            location = location_names.get(trip.location_id, "Unknown")
        else:
            location = MISSING

        writer.writerow([
            trip.trip_date,
            trip.trip_time,
            location,
            trip.catch_species or MISSING,
            str(trip.catch_quantity),
            _cell(trip.catch_size),
            _cell(trip.catch_weight),
            _cell(trip.weather_temp),
            _cell(trip.weather_wind),
            _cell(trip.weather_pressure),
            trip.moon_phase or MISSING,
            trip.water_conditions or MISSING,
            trip.notes or MISSING,
        ])

    return len(trips)


def export_filename(today: Optional[date] = None) -> str:
    """e.g. fishlog_export_2025-06-14.csv"""
    today = today or date.today()
    return f"fishlog_export_{today.isoformat()}.csv"


def _cell(value) -> str:
    return MISSING if value is None else str(value)
