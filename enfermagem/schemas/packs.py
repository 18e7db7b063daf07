"""Schemas for the rule and scale packs shipped as package data."""

from __future__ import annotations

from typing import Dict, Literal, Optional, Tuple

from .assessment import VitalStatus
from .common import StrictModel


class PackMeta(StrictModel):
    version: str = "1.0.0"
    locale: str = "pt-BR"


class VitalRule(StrictModel):
    when: str
    status: VitalStatus
    message: str


class SignRules(StrictModel):
    label: str
    unit: str = ""
    parser: Literal["decimal", "blood_pressure"] = "decimal"
    rules: Tuple[VitalRule, ...] = ()


class VitalRulePack(StrictModel):
    meta: PackMeta = PackMeta()
    aliases: Dict[str, str] = {}
    signs: Dict[str, SignRules]


class ScaleMeta(StrictModel):
    id: str
    name: str
    reference: Optional[str] = None


class ScaleOption(StrictModel):
    score: int
    text: str


class ScaleItem(StrictModel):
    label: str
    options: Tuple[ScaleOption, ...]

    def allows(self, score: Optional[int]) -> bool:
        return score is not None and any(option.score == score for option in self.options)


class RiskBand(StrictModel):
    min: int
    tier: str


class ScaleDefinition(StrictModel):
    meta: ScaleMeta
    items: Dict[str, ScaleItem] = {}
    bands: Tuple[RiskBand, ...] = ()
    levels: Tuple[ScaleOption, ...] = ()
    classifications: Tuple[str, ...] = ()
    unset_tier: Optional[str] = None

    def tier_for(self, total: int) -> Optional[str]:
        """First band, highest threshold first, whose minimum *total* reaches."""

        for band in self.bands:
            if total >= band.min:
                return band.tier
        return None
