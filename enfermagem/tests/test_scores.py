from __future__ import annotations

import logging

import pytest

from enfermagem.core.scores import (
    get_scorer,
    registered_scales,
    run_scores,
    score_abemid,
    score_braden,
    score_morse,
    score_nead,
    score_pps,
)
from enfermagem.schemas.assessment import BradenAssessment, MorseAssessment

BRADEN_ITEMS = ("sensory", "moisture", "activity", "mobility", "nutrition", "friction")


def _braden(*scores: int) -> dict:
    return dict(zip(BRADEN_ITEMS, scores))


def test_braden_minimum_scores_are_very_high_risk():
    result = score_braden(_braden(1, 1, 1, 1, 1, 1))
    assert result.total == 6
    assert result.tier == "Risco Muito Alto"
    assert result.filled is True


def test_braden_blank_assessment_is_not_filled():
    result = score_braden(BradenAssessment())
    assert result.tier == "Não preenchido"
    assert result.filled is False
    assert result.total == 0


def test_braden_blank_form_payload_with_zeros_is_not_filled():
    result = score_braden(_braden(0, 0, 0, 0, 0, 0))
    assert result.tier == "Não preenchido"


@pytest.mark.parametrize(
    "scores, total, tier",
    [
        ((4, 4, 4, 4, 4, 3), 23, "Sem Risco"),
        ((4, 4, 4, 4, 2, 1), 19, "Sem Risco"),
        ((4, 4, 4, 3, 2, 1), 18, "Risco Leve"),
        ((3, 3, 3, 3, 2, 1), 15, "Risco Leve"),
        ((3, 3, 3, 2, 2, 1), 14, "Risco Moderado"),
        ((3, 3, 2, 2, 2, 1), 13, "Risco Moderado"),
        ((2, 2, 2, 2, 2, 2), 12, "Risco Alto"),
        ((2, 2, 2, 2, 1, 1), 10, "Risco Alto"),
        ((2, 2, 2, 1, 1, 1), 9, "Risco Muito Alto"),
    ],
)
def test_braden_tiers(scores, total, tier):
    result = score_braden(_braden(*scores))
    assert result.total == total
    assert result.tier == tier


def test_braden_is_filled_one_item_at_a_time():
    assessment = BradenAssessment()
    assert score_braden(assessment).filled is False
    assessment = assessment.with_item("sensory", 3)
    result = score_braden(assessment)
    assert result.filled is True
    assert result.total == 3
    assert result.tier == "Risco Muito Alto"


def test_braden_item_outside_options_leaves_form_unfilled():
    result = score_braden(BradenAssessment(sensory=7))
    assert result.filled is False
    assert result.total == 0
    assert result.tier == "Não preenchido"


def test_braden_out_of_range_scores_contribute_nothing():
    assert score_braden({"sensory": 7}).tier == "Não preenchido"
    assert score_braden(_braden(4, 4, 4, 4, 4, 4)).total == 20
    assert score_braden({"sensory": "3", "moisture": "abc"}).total == 3


def test_braden_unknown_item_raises_key_error():
    with pytest.raises(KeyError):
        BradenAssessment().with_item("hydration", 2)


def test_morse_maximum_is_high_risk():
    result = score_morse(
        {"history": 25, "diagnosis": 15, "ambulatoryAid": 30, "ivTherapy": 20, "gait": 20, "mentalStatus": 15}
    )
    assert result.total == 125
    assert result.tier == "Alto Risco"


def test_morse_all_zero_is_low_risk():
    result = score_morse(MorseAssessment())
    assert result.total == 0
    assert result.tier == "Baixo Risco"
    assert result.filled is True


def test_morse_tiers():
    assert score_morse({"history": 25, "iv_therapy": 20}).tier == "Alto Risco"
    assert score_morse({"history": 25, "diagnosis": 15}).tier == "Médio Risco"
    assert score_morse({"history": 25}).tier == "Médio Risco"
    assert score_morse({"gait": 20}).tier == "Baixo Risco"


def test_morse_values_outside_options_contribute_nothing():
    result = score_morse({"history": 10, "gait": 10})
    assert result.total == 10


def test_morse_with_item_accepts_form_key():
    assessment = MorseAssessment().with_item("ambulatoryAid", 15)
    assert assessment.ambulatory_aid == 15
    assert score_morse(assessment).total == 15


def test_pps_levels():
    result = score_pps("50%")
    assert result.total == 50
    assert result.tier == "Principalmente sentado/deitado, doença extensa."
    assert score_pps(100).total == 100
    assert score_pps("0%").tier == "Morte."


def test_pps_blank_or_invalid_is_not_filled():
    for value in ("", "55%", None):
        result = score_pps(value)
        assert result.filled is False
        assert result.tier == "Não preenchido"


def test_abemid_classification_matches_vocabulary():
    result = score_abemid({"score": "15", "classification": "alta dependencia"})
    assert result.tier == "Alta Dependência"
    assert result.total == 15


def test_nead_blank_is_not_filled():
    result = score_nead({"score": "", "classification": ""})
    assert result.filled is False
    assert result.total is None
    assert score_nead({"classification": "Dependência Total"}).tier == "Dependência Total"


def test_registry_runs_present_sections_only():
    results = run_scores({"braden": _braden(2, 2, 2, 2, 2, 2), "morse": None, "pps": "30%"})
    assert set(results) == {"braden", "pps"}
    assert results["braden"].tier == "Risco Alto"


def test_registry_skips_structurally_invalid_sections(caplog):
    caplog.set_level(logging.WARNING, logger="enfermagem")
    results = run_scores({"braden": ["invalid"], "morse": {"history": 25}})
    assert "braden" not in results
    assert results["morse"].total == 25
    assert "braden" in caplog.text


def test_registry_lists_every_scale():
    assert set(registered_scales()) == {"braden", "morse", "pps", "abemid", "nead"}
    with pytest.raises(KeyError):
        get_scorer("glasgow")
