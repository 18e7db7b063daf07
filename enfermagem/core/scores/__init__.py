"""Assessment scales with registry and implementations."""

from . import braden, classified, morse, pps  # noqa: F401
from .braden import score_braden
from .classified import score_abemid, score_nead
from .morse import score_morse
from .pps import score_pps
from .registry import get_scorer, register, registered_scales, run_scores

__all__ = [
    "get_scorer",
    "register",
    "registered_scales",
    "run_scores",
    "score_abemid",
    "score_braden",
    "score_morse",
    "score_nead",
    "score_pps",
]
