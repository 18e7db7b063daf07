from __future__ import annotations

from enfermagem.core.trend import compute_trend


def test_blood_pressure_trend_uses_systolic():
    assert compute_trend("bloodPressure", "130/80", "120/90") == "up"
    assert compute_trend("bloodPressure", "110/95", "120/80") == "down"


def test_numeric_trend_with_tolerance():
    assert compute_trend("pulse", "80", "90") == "down"
    assert compute_trend("temperature", "38,2", "37.5") == "up"
    assert compute_trend("temperature", "36,55", "36.5") == "stable"


def test_missing_values_have_no_trend():
    assert compute_trend("heartRate", "", "80") == "none"
    assert compute_trend("heartRate", "80", None) == "none"
    assert compute_trend("temperature", "abc", "36") == "none"
