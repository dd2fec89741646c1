"""
schemas.py — input-side Pydantic v2 data contracts.

Defines:
  - Region, InsuranceMode, ComparisonPeriod enums
  - SalaryInput  (the snapshot the presentation layer hands to the engine)

SalaryInput CLAMPS instead of rejecting:
  - negative money amounts (gross, manual_base, other_costs) become 0
  - dependents become max(0, floor(value))
Unknown fields are still rejected (extra='forbid'): that is a structural error,
not a numeric one.
"""
from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from netpay.config import settings


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Region(str, Enum):
    """Regional minimum-wage tier (Vùng I–IV)."""
    I = "I"
    II = "II"
    III = "III"
    IV = "IV"


class InsuranceMode(str, Enum):
    full = "full"       # contribution base = gross salary
    manual = "manual"   # contribution base = manual_base


class ComparisonPeriod(str, Enum):
    before = "before"   # before the law-change boundary date
    after = "after"     # on or after the boundary date


# ---------------------------------------------------------------------------
# SalaryInput: one immutable snapshot per calculation
# ---------------------------------------------------------------------------

class SalaryInput(BaseModel):
    """
    Monthly salary inputs for one comparison run.

    All monetary fields are in VND, whole currency units, MONTHLY.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    gross: float = Field(
        default=0,
        description="Gross monthly salary (before insurance and tax).",
    )
    dependents: int = Field(
        default=0,
        description="Number of registered dependents. Fractions are rounded down.",
    )
    region: Region = Field(
        default=Region.I,
        description="Region tier; caps the unemployment-insurance base at 20 × regional minimum wage.",
    )
    insurance_mode: InsuranceMode = Field(
        default=InsuranceMode.full,
        description="full = insure on gross; manual = insure on manual_base.",
    )
    manual_base: Optional[float] = Field(
        default=None,
        description="Declared insurance contribution base, used only in manual mode.",
    )
    other_costs: float = Field(
        default=0,
        description="Flat post-tax deduction (union fee, meals, ...) taken from both nets.",
    )
    period: ComparisonPeriod = Field(
        default_factory=lambda: ComparisonPeriod(settings.default_period),
        description="Which side of the law-change boundary date to compare on.",
    )

    @field_validator("gross", "other_costs", mode="before")
    @classmethod
    def _none_amount(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("gross", "other_costs", mode="after")
    @classmethod
    def _floor_amount(cls, value: float) -> float:
        # Runs on the coerced float, so "-5000000" and Decimal("-5") clamp too
        return max(0.0, value)

    @field_validator("manual_base", mode="after")
    @classmethod
    def _floor_manual_base(cls, value: Optional[float]) -> Optional[float]:
        return None if value is None else max(0.0, value)

    @field_validator("dependents", mode="before")
    @classmethod
    def _floor_dependents(cls, value: Any) -> Any:
        # int coercion rejects fractions, so floor them first
        if value is None:
            return 0
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                return value
        if isinstance(value, (float, Decimal)):
            if not math.isfinite(value):
                return 0
            return math.floor(value)
        return value

    @field_validator("dependents", mode="after")
    @classmethod
    def _clamp_dependents(cls, value: int) -> int:
        return max(0, value)


__all__ = [
    "Region",
    "InsuranceMode",
    "ComparisonPeriod",
    "SalaryInput",
]
