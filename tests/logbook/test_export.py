# ABOUTME: Tests for CSV export of logged trips
# ABOUTME: Validates headers, quoting, missing values and location resolution

import csv
import io
from datetime import date

import pytest

from fishlog.logbook.export import HEADERS, export_filename, export_trips_csv
from fishlog.logbook.models import Location, Trip
from fishlog.logbook.store import LogbookStore


@pytest.fixture
def store(tmp_path):
    return LogbookStore(tmp_path / "logbook.json")


def export_rows(store) -> list[list[str]]:
    out = io.StringIO()
    export_trips_csv(store, out)
    return list(csv.reader(io.StringIO(out.getvalue())))


def test_export_with_no_trips_raises(store):
    with pytest.raises(ValueError, match="No trips to export"):
        export_trips_csv(store, io.StringIO())


def test_header_row(store):
    store.save_trip(Trip(trip_date="2025-06-14", trip_time="06:30"))

    rows = export_rows(store)

    assert rows[0] == HEADERS
    assert rows[0][7] == "Temperature (°C)"


def test_full_trip_row(store):
    location = store.save_location(Location(name="Abbey Lake", latitude=51.5, longitude=-0.09))
    store.save_trip(Trip(
        trip_date="2025-06-14",
        trip_time="06:30",
        location_id=location.id,
        catch_species="Bass",
        catch_quantity=2,
        catch_size=41.5,
        catch_weight=1.2,
        weather_temp=18.0,
        weather_wind=15.0,
        weather_pressure=1016.0,
        moon_phase="Full Moon",
        water_conditions="Clear",
        notes="Topwater at first light",
    ))

    rows = export_rows(store)

    assert rows[1] == [
        "2025-06-14", "06:30", "Abbey Lake", "Bass", "2", "41.5", "1.2",
        "18.0", "15.0", "1016.0", "Full Moon", "Clear", "Topwater at first light",
    ]


def test_missing_values_are_na(store):
    store.save_trip(Trip(trip_date="2025-06-14", trip_time="06:30"))

    row = export_rows(store)[1]

    assert row[2] == "N/A"   # no location
    assert row[4] == "0"
    assert row[5:] == ["N/A"] * 8


def test_deleted_location_is_unknown(store):
    store.save_trip(Trip(trip_date="2025-06-14", trip_time="06:30", location_id="gone"))

    assert export_rows(store)[1][2] == "Unknown"


def test_every_cell_is_quoted(store):
    store.save_trip(Trip(trip_date="2025-06-14", trip_time="06:30", notes='Lost a big one, "huge"'))
    out = io.StringIO()

    written = export_trips_csv(store, out)

    lines = out.getvalue().splitlines()
    assert written == 1
    assert lines[0].startswith('"Date","Time"')
    assert lines[1].startswith('"2025-06-14","06:30"')
    assert export_rows(store)[1][12] == 'Lost a big one, "huge"'


def test_export_filename():
    assert export_filename(date(2025, 6, 14)) == "fishlog_export_2025-06-14.csv"
