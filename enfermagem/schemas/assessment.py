"""Value objects exchanged with the form and report layers."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from ..core.normalizer.units import parse_points, parse_volume
from .common import FormModel, StrictModel

VitalSign = Literal[
    "bloodPressure",
    "pulse",
    "heartRate",
    "temperature",
    "saturation",
    "glycemia",
    "co2",
    "oxygen",
]
VitalStatus = Literal["normal", "warning", "critical"]
Trend = Literal["up", "down", "stable", "none"]

VITAL_SIGNS: tuple[str, ...] = (
    "bloodPressure",
    "pulse",
    "heartRate",
    "temperature",
    "saturation",
    "glycemia",
    "co2",
    "oxygen",
)

STATUS_RANK: Dict[str, int] = {"normal": 0, "warning": 1, "critical": 2}


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


class VitalReading(StrictModel):
    sign: str
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: object) -> str:
        return _as_text(value)


class VitalAnalysis(StrictModel):
    """Severity of one reading. ``message`` is only set for abnormal readings."""

    status: VitalStatus = "normal"
    message: Optional[str] = None

    @model_validator(mode="after")
    def _normal_has_no_message(self) -> "VitalAnalysis":
        if self.status == "normal" and self.message:
            raise ValueError("normal readings carry no message")
        return self

    @property
    def is_abnormal(self) -> bool:
        return self.status != "normal"


class FluidBalanceRecord(FormModel):
    """Shift intake/output volumes in millilitres."""

    intake_oral: str = ""
    intake_parenteral: str = ""
    intake_other: str = ""
    output_urine: str = ""
    output_emesis: str = ""
    output_drains: str = ""
    output_stool: str = ""
    balance_total: float = 0.0

    @field_validator(
        "intake_oral",
        "intake_parenteral",
        "intake_other",
        "output_urine",
        "output_emesis",
        "output_drains",
        "output_stool",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: object) -> str:
        return _as_text(value)

    @field_validator("balance_total", mode="before")
    @classmethod
    def _coerce_total(cls, value: object) -> float:
        # Recomputed from the volumes on every edit; a stale stored total is not trusted.
        return parse_volume(value)


class BradenAssessment(FormModel):
    """Braden sub-scores; ``None`` marks an item the clinician has not touched."""

    sensory: Optional[int] = None
    moisture: Optional[int] = None
    activity: Optional[int] = None
    mobility: Optional[int] = None
    nutrition: Optional[int] = None
    friction: Optional[int] = None

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_points(cls, value: object) -> Optional[int]:
        points = parse_points(value)
        # 0 is what blank forms send for untouched items.
        if points is None or points <= 0:
            return None
        return points


class MorseAssessment(FormModel):
    history: int = 0
    diagnosis: int = 0
    ambulatory_aid: int = 0
    iv_therapy: int = 0
    gait: int = 0
    mental_status: int = 0

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_points(cls, value: object) -> int:
        return parse_points(value) or 0


class ClassifiedScale(FormModel):
    """Free-score scales filled by classification (ABEMID, NEAD)."""

    score: str = ""
    classification: str = ""

    @field_validator("score", "classification", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> str:
        return _as_text(value)


class ScaleResult(StrictModel):
    scale: str
    total: Optional[int] = None
    tier: str
    filled: bool = True


class NursingAssessment(StrictModel):
    vitals: Dict[str, VitalAnalysis] = Field(default_factory=dict)
    highest_status: VitalStatus = "normal"
    alerts: List[str] = Field(default_factory=list)
    vitals_text: str = ""
    fluid_balance: Optional[FluidBalanceRecord] = None
    scores: Dict[str, ScaleResult] = Field(default_factory=dict)
