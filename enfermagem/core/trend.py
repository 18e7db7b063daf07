"""Direction of a vital sign compared with the previous reading."""

from __future__ import annotations

from typing import Any, Optional

from ..schemas.assessment import Trend
from .normalizer.units import parse_decimal, parse_leading_int
from .rules.engine import resolve_sign

__all__ = ["compute_trend", "STABLE_DELTA"]

STABLE_DELTA = 0.1


def _reading(sign: Optional[str], value: Any) -> Optional[float]:
    if sign == "bloodPressure":
        # Systolic half only.
        systolic = parse_leading_int(str(value).split("/")[0])
        return float(systolic) if systolic is not None else None
    return parse_decimal(value)


def compute_trend(sign: str, current: Any, previous: Any) -> Trend:
    if not current or not previous:
        return "none"
    name = resolve_sign(sign)
    now = _reading(name, current)
    before = _reading(name, previous)
    if now is None or before is None:
        return "none"
    if abs(now - before) < STABLE_DELTA:
        return "stable"
    return "up" if now > before else "down"
