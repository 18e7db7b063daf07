"""Palliative Performance Scale (PPS)."""

from __future__ import annotations

from typing import Any

from ...content import load_scale
from ...schemas.assessment import ScaleResult
from ..normalizer.units import parse_points
from .registry import register

__all__ = ["score_pps"]


@register("pps")
def score_pps(value: Any) -> ScaleResult:
    """Map a PPS selection such as ``"50%"`` to its level description."""

    scale = load_scale("pps")
    percent = parse_points(str(value).strip().rstrip("%")) if value is not None else None
    for level in scale.levels:
        if level.score == percent:
            return ScaleResult(scale="pps", total=level.score, tier=level.text)
    return ScaleResult(scale="pps", total=None, tier=scale.unset_tier or "N/A", filled=False)
