"""High-level pipeline applying every clinical rule to one report entry."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..schemas.assessment import (
    STATUS_RANK,
    VITAL_SIGNS,
    FluidBalanceRecord,
    NursingAssessment,
    VitalAnalysis,
    VitalReading,
)
from .fluid_balance import recompute
from .report import alerts_summary, vitals_sentence
from .rules.engine import classify_vital
from .scores import run_scores

__all__ = ["assess", "classify_readings"]

logger = logging.getLogger(__name__)


def classify_readings(entry: Mapping[str, Any]) -> Dict[str, VitalAnalysis]:
    """Classify every vital sign filled in *entry*, keyed by form field."""

    analyses: Dict[str, VitalAnalysis] = {}
    for sign in VITAL_SIGNS:
        reading = VitalReading(sign=sign, value=entry.get(sign))
        if not reading.value:
            continue
        analyses[sign] = classify_vital(reading.sign, reading.value)
    return analyses


def _fluid_balance(entry: Mapping[str, Any]) -> Optional[FluidBalanceRecord]:
    section = entry.get("fluidBalance")
    if section is None:
        return None
    return recompute(section)


def assess(entry: Mapping[str, Any]) -> NursingAssessment:
    """Run the classifier, the balance calculator and every scale over *entry*."""

    analyses = classify_readings(entry)
    highest = max((a.status for a in analyses.values()), key=STATUS_RANK.__getitem__, default="normal")
    alerts = alerts_summary(analyses)
    scores = run_scores(entry)
    balance = _fluid_balance(entry)

    logger.info(
        "Avaliação concluída: %s sinais, %s alertas, %s escalas, pior estado=%s",
        len(analyses),
        len(alerts),
        len(scores),
        highest,
    )
    return NursingAssessment(
        vitals=analyses,
        highest_status=highest,
        alerts=alerts,
        vitals_text=vitals_sentence(entry),
        fluid_balance=balance,
        scores=scores,
    )
