"""Morse fall scale."""

from __future__ import annotations

from typing import Any, Mapping, Union

from ...content import load_scale
from ...schemas.assessment import MorseAssessment, ScaleResult
from .registry import register

__all__ = ["score_morse"]


@register("morse")
def score_morse(assessment: Union[MorseAssessment, Mapping[str, Any]]) -> ScaleResult:
    # Zero is a reachable score on every item, so an all-zero form is "Baixo Risco".
    if not isinstance(assessment, MorseAssessment):
        assessment = MorseAssessment.model_validate(assessment)
    scale = load_scale("morse")
    values = assessment.model_dump()
    total = sum(values[name] for name, item in scale.items.items() if item.allows(values.get(name)))
    return ScaleResult(scale="morse", total=total, tier=scale.tier_for(total) or "N/A")
