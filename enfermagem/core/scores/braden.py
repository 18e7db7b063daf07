"""Braden scale for pressure-injury risk."""

from __future__ import annotations

from typing import Any, Mapping, Union

from ...content import load_scale
from ...schemas.assessment import BradenAssessment, ScaleResult
from .registry import register

__all__ = ["score_braden"]


@register("braden")
def score_braden(assessment: Union[BradenAssessment, Mapping[str, Any]]) -> ScaleResult:
    """Sum the Braden items and map the total to a risk tier.

    Items that were never touched (or hold a score outside the item's
    options) add nothing. A form with no valid item at all reports the
    "Não preenchido" tier rather than the very-high-risk band.
    """

    if not isinstance(assessment, BradenAssessment):
        assessment = BradenAssessment.model_validate(assessment)
    scale = load_scale("braden")
    values = assessment.model_dump()
    chosen = [values[name] for name, item in scale.items.items() if item.allows(values.get(name))]
    if not chosen:
        return ScaleResult(scale="braden", total=0, tier=scale.unset_tier or "N/A", filled=False)
    total = sum(chosen)
    return ScaleResult(scale="braden", total=total, tier=scale.tier_for(total) or "N/A")
