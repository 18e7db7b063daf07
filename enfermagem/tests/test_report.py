from __future__ import annotations

from enfermagem.core.report import alerts_summary, vitals_sentence
from enfermagem.core.rules.engine import classify_vital


def test_vitals_sentence_in_room_air():
    entry = {
        "bloodPressure": "120/80",
        "heartRate": "78",
        "temperature": "36,5",
        "saturation": "97",
        "glycemia": "90",
    }
    assert vitals_sentence(entry) == (
        "Sinais vitais mantidos: PA: 120/80 mmHg, FC: 78 bpm, Tax: 36,5°C, "
        "SatO2: 97%, em ar ambiente, HGT: 90 mg/dL."
    )


def test_vitals_sentence_with_oxygen_support():
    entry = {"saturation": "93", "oxygen": "2", "oxygenSupportType": "cateter nasal"}
    assert vitals_sentence(entry) == "Sinais vitais mantidos: SatO2: 93%, em uso de O2 (2 L/min via cateter nasal)."
    assert "dispositivo não especificado" in vitals_sentence({"oxygen": "3"})


def test_vitals_sentence_empty_entry():
    assert vitals_sentence({}) == ""
    assert vitals_sentence({"bloodPressure": "", "pulse": None}) == ""


def test_alerts_summary_lists_critical_first():
    analyses = {
        "temperature": classify_vital("temperature", "38"),
        "bloodPressure": classify_vital("bloodPressure", "190/120"),
        "saturation": classify_vital("saturation", "97"),
    }
    assert alerts_summary(analyses) == [
        "CRÍTICO - PA: Crise Hipertensiva",
        "ATENÇÃO - Tax: Estado Febril",
    ]


def test_alerts_summary_labels_heart_rate_and_pulse():
    lines = alerts_summary(
        {
            "heartRate": classify_vital("heartRate", "150"),
            "pulse": classify_vital("pulse", "55"),
        }
    )
    assert lines[0].startswith("CRÍTICO - FC: Taquicardia Severa")
    assert lines[1].startswith("ATENÇÃO - Pulso: Bradicardia")
