"""Complexity scales recorded as a free score plus a classification (ABEMID, NEAD)."""

from __future__ import annotations

from typing import Any, Mapping, Union

from ...content import load_scale
from ...schemas.assessment import ClassifiedScale, ScaleResult
from ..normalizer.text import match_choice
from ..normalizer.units import parse_points
from .registry import register

__all__ = ["score_abemid", "score_nead", "score_classified"]


def score_classified(scale_id: str, section: Union[ClassifiedScale, Mapping[str, Any]]) -> ScaleResult:
    if not isinstance(section, ClassifiedScale):
        section = ClassifiedScale.model_validate(section)
    scale = load_scale(scale_id)
    score = parse_points(section.score) if section.score.strip() else None
    tier = match_choice(section.classification, scale.classifications)
    if tier is None:
        return ScaleResult(scale=scale_id, total=score, tier=scale.unset_tier or "N/A", filled=False)
    return ScaleResult(scale=scale_id, total=score, tier=tier)


@register("abemid")
def score_abemid(section: Union[ClassifiedScale, Mapping[str, Any]]) -> ScaleResult:
    return score_classified("abemid", section)


@register("nead")
def score_nead(section: Union[ClassifiedScale, Mapping[str, Any]]) -> ScaleResult:
    return score_classified("nead", section)
