"""Parsing helpers for the free-text numeric fields of the nursing forms.

Half-typed values are normal while a clinician is filling a form, so every
helper returns ``None`` instead of raising when nothing usable is present.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Tuple

__all__ = [
    "parse_decimal",
    "parse_leading_int",
    "parse_blood_pressure",
    "parse_volume",
    "parse_points",
]


_DECIMAL_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def parse_decimal(value: Any) -> Optional[float]:
    """Read the leading decimal number of *value*.

    The first comma is taken as the decimal separator, so ``"37,8"`` and
    ``"37.8"`` read the same. Trailing units are ignored (``"38,5°C"`` is
    38.5).
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None
    text = str(value).replace(",", ".", 1)
    match = _DECIMAL_PREFIX_RE.match(text)
    if not match:
        return None
    number = float(match.group(1))
    if not math.isfinite(number):
        return None
    return number


def parse_leading_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    match = _INT_PREFIX_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_blood_pressure(value: Any) -> Optional[Tuple[int, int]]:
    """Return ``(systolic, diastolic)`` from a ``"S/D"`` reading.

    Each half has every non-digit character stripped before it is read.
    Anything other than exactly two halves, or a half left without digits,
    yields ``None``.
    """

    if value is None:
        return None
    parts = str(value).split("/")
    if len(parts) != 2:
        return None
    digits = [_NON_DIGIT_RE.sub("", part) for part in parts]
    if not all(digits):
        return None
    return int(digits[0]), int(digits[1])


def parse_volume(value: Any) -> float:
    """Volume in ml for balance arithmetic; unusable input counts as zero."""

    number = parse_decimal(value)
    return number if number is not None else 0.0


def parse_points(value: Any) -> Optional[int]:
    """Integer score picked on a scale item, or ``None`` when not usable."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    number = parse_decimal(value)
    if number is None or not number.is_integer():
        return None
    return int(number)
