"""Scale registry computing every assessment scale present in a report entry."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from pydantic import ValidationError

from ...schemas.assessment import ScaleResult

ScoreFunc = Callable[[Any], ScaleResult]

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, ScoreFunc] = {}


def register(name: str) -> Callable[[ScoreFunc], ScoreFunc]:
    """Register a scorer under the report entry key it reads (``braden``...)."""

    def decorator(func: ScoreFunc) -> ScoreFunc:
        _REGISTRY[name] = func
        return func

    return decorator


def registered_scales() -> tuple[str, ...]:
    return tuple(_REGISTRY)


def get_scorer(name: str) -> ScoreFunc:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown scale: {name}") from None


def run_scores(entry: Mapping[str, Any], names: Optional[Iterable[str]] = None) -> Dict[str, ScaleResult]:
    """Score each scale section of *entry*; absent sections are skipped."""

    requested = list(names) if names is not None else list(_REGISTRY)
    results: Dict[str, ScaleResult] = {}
    for name in requested:
        func = get_scorer(name)
        section = entry.get(name)
        if section is None:
            continue
        try:
            results[name] = func(section)
        except ValidationError as exc:
            logger.warning("Seção '%s' ignorada: %s erro(s) de validação", name, exc.error_count())
            continue
    return results
