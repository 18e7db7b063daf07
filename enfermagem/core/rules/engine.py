"""Rule evaluation engine classifying vital-sign readings by severity."""

from __future__ import annotations

import ast
import logging
import operator
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

from ...content import load_vital_rules
from ...schemas.assessment import VitalAnalysis
from ...schemas.packs import SignRules, VitalRulePack
from ..normalizer.text import field_key
from ..normalizer.units import parse_blood_pressure, parse_decimal

__all__ = ["classify_vital", "is_value_critical", "resolve_sign", "RuleEvaluationError"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleEvaluationError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


_ALLOWED_NAMES = {"value", "sys", "dia"}

_COMPARATORS = {
    ast.Lt: operator.lt,
    ast.LtE: operator.le,
    ast.Gt: operator.gt,
    ast.GtE: operator.ge,
    ast.Eq: operator.eq,
    ast.NotEq: operator.ne,
}

_NORMAL = VitalAnalysis(status="normal")


class _SafeEvaluator(ast.NodeVisitor):
    def __init__(self, variables: Dict[str, Any]):
        self.variables = variables

    def visit_Expression(self, node: ast.Expression) -> Any:
        return self.visit(node.body)

    def visit_BoolOp(self, node: ast.BoolOp) -> bool:
        if isinstance(node.op, ast.And):
            return all(bool(self.visit(value)) for value in node.values)
        if isinstance(node.op, ast.Or):
            return any(bool(self.visit(value)) for value in node.values)
        raise RuleEvaluationError(f"Unsupported boolean operator: {node.op!r}")

    def visit_UnaryOp(self, node: ast.UnaryOp) -> Any:
        operand = self.visit(node.operand)
        if isinstance(node.op, ast.Not):
            return not bool(operand)
        if isinstance(node.op, ast.USub) and isinstance(operand, (int, float)):
            return -operand
        raise RuleEvaluationError(f"Unsupported unary operator: {node.op!r}")

    def visit_Compare(self, node: ast.Compare) -> bool:
        """Evaluate chained comparisons; a missing operand never matches."""

        operands = [self.visit(node.left)] + [self.visit(item) for item in node.comparators]
        for op, left, right in zip(node.ops, operands, operands[1:]):
            compare = _COMPARATORS.get(type(op))
            if compare is None:
                raise RuleEvaluationError(f"Comparator {type(op).__name__} is not supported in vital rules")
            if left is None or right is None or not compare(left, right):
                return False
        return True

    def visit_Name(self, node: ast.Name) -> Optional[float]:
        if node.id in _ALLOWED_NAMES:
            return self.variables.get(node.id)
        raise RuleEvaluationError(f"Unknown variable {node.id!r}; vital rules may use value, sys or dia")

    def visit_Constant(self, node: ast.Constant) -> Any:
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise RuleEvaluationError(f"Only numeric constants are allowed in rules: {node.value!r}")
        return node.value

    def generic_visit(self, node: ast.AST) -> Any:
        raise RuleEvaluationError(f"{type(node).__name__} is not allowed in vital rules")


@lru_cache(maxsize=64)
def _compile(expression: str) -> ast.Expression:
    try:
        return ast.parse(expression, mode="eval")
    except SyntaxError as exc:
        raise RuleEvaluationError(f"Invalid rule expression {expression!r}: {exc.msg}") from exc


def _evaluate(expression: str, variables: Dict[str, Any]) -> bool:
    tree = _compile(expression)
    evaluator = _SafeEvaluator(variables)
    return bool(evaluator.visit(tree))


def resolve_sign(sign: str, pack: Optional[VitalRulePack] = None) -> Optional[str]:
    """Return the canonical sign name of the pack for *sign*, following aliases."""

    pack = pack or load_vital_rules()
    key = field_key(sign)
    for alias, target in pack.aliases.items():
        if field_key(alias) == key:
            return target
    for name in pack.signs:
        if field_key(name) == key:
            return name
    return None


def _variables(table: SignRules, raw_value: str) -> Optional[Dict[str, float]]:
    if table.parser == "blood_pressure":
        pressure = parse_blood_pressure(raw_value)
        if pressure is None:
            return None
        systolic, diastolic = pressure
        return {"sys": systolic, "dia": diastolic}
    number = parse_decimal(raw_value)
    if number is None:
        return None
    return {"value": number}


def classify_vital(sign: str, raw_value: Any) -> VitalAnalysis:
    """Classify one reading of *sign* as normal, warning or critical.

    Empty, unparseable or unknown input is not an error while a form is being
    filled: it classifies as ``normal`` without a message.
    """

    if raw_value is None or raw_value == "":
        return _NORMAL
    pack = load_vital_rules()
    name = resolve_sign(sign, pack)
    if name is None:
        logger.debug("Sinal vital sem regras: %s", sign)
        return _NORMAL
    table = pack.signs[name]
    variables = _variables(table, str(raw_value))
    if variables is None:
        return _NORMAL
    for rule in table.rules:
        if _evaluate(rule.when, variables):
            return VitalAnalysis(status=rule.status, message=rule.message)
    return _NORMAL


def is_value_critical(sign: str, raw_value: Any) -> bool:
    return classify_vital(sign, raw_value).status == "critical"
