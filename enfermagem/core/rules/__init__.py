"""Ordered vital-sign rule evaluation."""

from .engine import RuleEvaluationError, classify_vital, is_value_critical

__all__ = ["RuleEvaluationError", "classify_vital", "is_value_critical"]
