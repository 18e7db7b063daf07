"""Helpers to load the vital-sign rule pack and the scale definitions."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import yaml

from ..schemas.packs import ScaleDefinition, VitalRulePack

__all__ = ["load_vital_rules", "load_scale"]


def _read_yaml(*parts: str) -> Dict[str, Any]:
    node = resources.files(__name__)
    for part in parts:
        node = node.joinpath(part)
    with node.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


@lru_cache(maxsize=1)
def load_vital_rules() -> VitalRulePack:
    """Load the ordered vital-sign rules."""

    return VitalRulePack.model_validate(_read_yaml("vital_rules.yml"))


@lru_cache(maxsize=16)
def load_scale(scale_id: str) -> ScaleDefinition:
    """Load the scale identified by *scale_id* (``braden``, ``morse``...)."""

    try:
        data = _read_yaml("scales", f"{scale_id}.yml")
    except FileNotFoundError as exc:
        raise KeyError(f"Unknown scale: {scale_id}") from exc
    return ScaleDefinition.model_validate(data)
