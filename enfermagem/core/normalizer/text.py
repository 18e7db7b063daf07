"""Text matching helpers for labels typed or dictated into the forms."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, Optional

__all__ = ["normalize_text", "match_choice", "field_key"]


_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"[\s_\-]+")


def normalize_text(value: str) -> str:
    """Return a lower-cased, accentless version of *value* suitable for matching."""

    if not isinstance(value, str):
        return ""
    normalized = unicodedata.normalize("NFKD", value)
    normalized = normalized.encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower().strip()
    return _WHITESPACE_RE.sub(" ", normalized)


def match_choice(value: str, choices: Iterable[str]) -> Optional[str]:
    """Return the canonical entry of *choices* equal to *value* ignoring case and accents."""

    wanted = normalize_text(value)
    if not wanted:
        return None
    for choice in choices:
        if normalize_text(choice) == wanted:
            return choice
    return None


def field_key(name: str) -> str:
    """Fold ``bloodPressure``, ``blood_pressure`` and ``Blood Pressure`` to one key."""

    return _SEPARATOR_RE.sub("", normalize_text(name))
