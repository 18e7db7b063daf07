"""Shift fluid balance: intake volumes minus output volumes, in ml."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Union

from ..schemas.assessment import FluidBalanceRecord
from .normalizer.units import parse_volume

__all__ = [
    "INTAKE_FIELDS",
    "OUTPUT_FIELDS",
    "compute_balance",
    "recompute",
    "update_field",
    "balance_direction",
    "format_balance",
]

INTAKE_FIELDS = ("intake_oral", "intake_parenteral", "intake_other")
OUTPUT_FIELDS = ("output_urine", "output_emesis", "output_drains")

RecordLike = Union[FluidBalanceRecord, Mapping[str, Any]]


def _as_record(record: RecordLike) -> FluidBalanceRecord:
    if isinstance(record, FluidBalanceRecord):
        return record
    return FluidBalanceRecord.model_validate(record)


def compute_balance(record: RecordLike) -> float:
    record = _as_record(record)
    intake = sum(parse_volume(getattr(record, name)) for name in INTAKE_FIELDS)
    output = sum(parse_volume(getattr(record, name)) for name in OUTPUT_FIELDS)
    return intake - output


def recompute(record: RecordLike) -> FluidBalanceRecord:
    """Return *record* with ``balance_total`` recalculated from every field."""

    record = _as_record(record)
    return record.model_copy(update={"balance_total": compute_balance(record)})


def update_field(record: RecordLike, field: str, value: Any) -> FluidBalanceRecord:
    """Apply one form edit and recompute the whole balance.

    ``field`` accepts the form key (``intakeOral``) or the attribute name.
    Raises ``KeyError`` for a field the record does not have.
    """

    record = _as_record(record)
    name = FluidBalanceRecord.resolve_field(field)
    if name == "balance_total":
        raise KeyError(field)
    return recompute(record.with_item(name, value))


def balance_direction(total: float) -> Literal["positivo", "negativo", "neutro"]:
    if total > 0:
        return "positivo"
    if total < 0:
        return "negativo"
    return "neutro"


def format_balance(total: float) -> str:
    sign = "+" if total > 0 else ""
    amount = int(total) if float(total).is_integer() else total
    return f"{sign}{amount} ml"
