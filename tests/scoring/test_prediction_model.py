# ABOUTME: Tests for the FishingPrediction data structure
# ABOUTME: Validates field storage and score range checks

from datetime import date

import pytest

from fishlog.scoring.models import FishingPrediction


def make_prediction(score: int) -> FishingPrediction:
    return FishingPrediction(
        date=date(2025, 6, 14),
        time_window="06:00 - 09:00",
        score=score,
        conditions="Full moon phase, optimal temperature",
        temperature_c=18.0,
        moon_phase="Full Moon",
        pressure_mb=1013.0,
    )


def test_prediction_stores_all_fields():
    prediction = make_prediction(100)

    assert prediction.date == date(2025, 6, 14)
    assert prediction.time_window == "06:00 - 09:00"
    assert prediction.score == 100
    assert prediction.moon_phase == "Full Moon"
    assert prediction.pressure_mb == 1013.0


def test_prediction_accepts_range_edges():
    assert make_prediction(0).score == 0
    assert make_prediction(100).score == 100


@pytest.mark.parametrize("score", [-1, 101])
def test_prediction_rejects_out_of_range_score(score):
    with pytest.raises(ValueError):
        make_prediction(score)
