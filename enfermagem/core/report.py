"""Shift-report text for the vital signs section."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..content import load_vital_rules
from ..schemas.assessment import STATUS_RANK, VitalAnalysis
from .rules.engine import resolve_sign

__all__ = ["vitals_sentence", "alerts_summary"]

_STATUS_LABEL = {"critical": "CRÍTICO", "warning": "ATENÇÃO"}
# Aliased signs keep their own label in the report.
_ALIAS_LABELS = {"heartRate": "FC"}


def _text(entry: Mapping[str, Any], key: str) -> str:
    value = entry.get(key)
    return str(value).strip() if value is not None else ""


def vitals_sentence(entry: Mapping[str, Any]) -> str:
    """Build the "Sinais vitais mantidos: ..." paragraph from the form values."""

    parts: List[str] = []
    pressure = _text(entry, "bloodPressure")
    heart_rate = _text(entry, "heartRate")
    temperature = _text(entry, "temperature")
    saturation = _text(entry, "saturation")
    oxygen = _text(entry, "oxygen")
    glycemia = _text(entry, "glycemia")

    if pressure:
        parts.append(f"PA: {pressure} mmHg")
    if heart_rate:
        parts.append(f"FC: {heart_rate} bpm")
    if temperature:
        parts.append(f"Tax: {temperature}°C")
    if saturation:
        parts.append(f"SatO2: {saturation}%")
    if oxygen:
        device = _text(entry, "oxygenSupportType") or "dispositivo não especificado"
        parts.append(f"em uso de O2 ({oxygen} L/min via {device})")
    elif saturation:
        parts.append("em ar ambiente")
    if glycemia:
        parts.append(f"HGT: {glycemia} mg/dL")

    if not parts:
        return ""
    return f"Sinais vitais mantidos: {', '.join(parts)}."


def alerts_summary(analyses: Dict[str, VitalAnalysis]) -> List[str]:
    """One line per abnormal reading, critical readings first."""

    pack = load_vital_rules()
    flagged = [(sign, analysis) for sign, analysis in analyses.items() if analysis.is_abnormal]
    flagged.sort(key=lambda pair: -STATUS_RANK[pair[1].status])
    lines = []
    for sign, analysis in flagged:
        name = resolve_sign(sign, pack)
        label = _ALIAS_LABELS.get(sign) or (pack.signs[name].label if name else sign)
        lines.append(f"{_STATUS_LABEL[analysis.status]} - {label}: {analysis.message}")
    return lines
