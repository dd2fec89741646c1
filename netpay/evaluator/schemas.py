"""
schemas.py — evaluator Pydantic v2 data contracts.

Defines:
  - TaxBracket          (one marginal-rate band; max=None means unbounded)
  - TaxRegimeConfig     (deductions + ordered bracket table for one law version)
  - BracketDetail       (per-bracket line of a calculation)
  - DeductionDetails    (deductions actually applied)
  - CalculationResult   (full computation for one regime)
  - EmployeeBreakdown / EmployerBreakdown / InsuranceResult
  - ResolvedRegimes     (Regime Resolver output)
  - ComparisonResult    (old vs new, output of compare_regimes())

Every model is frozen. Derived variants are built with model_copy(update=...),
never by mutating a canonical instance.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, computed_field, model_validator

from netpay.inputs.schemas import ComparisonPeriod, InsuranceMode, Region

_FROZEN = ConfigDict(extra="forbid", frozen=True)


# ---------------------------------------------------------------------------
# Bracket tables
# ---------------------------------------------------------------------------

class TaxBracket(BaseModel):
    model_config = _FROZEN

    min: float
    max: Optional[float] = None    # None → unbounded top bracket
    rate: float                    # marginal rate, e.g. 0.05
    label: str


class TaxRegimeConfig(BaseModel):
    """
    Deduction amounts and bracket table for one PIT law version.

    The bracket table must cover [0, ∞) without gaps or overlaps:
      - brackets[0].min == 0
      - brackets[i].max == brackets[i+1].min
      - only the last bracket is unbounded
    """
    model_config = _FROZEN

    name: str
    self_deduction: float
    dependent_deduction: float
    brackets: List[TaxBracket]

    @model_validator(mode="after")
    def _check_contiguous(self) -> "TaxRegimeConfig":
        if not self.brackets:
            raise ValueError(f"{self.name}: bracket table is empty")
        if self.brackets[0].min != 0:
            raise ValueError(f"{self.name}: first bracket must start at 0")
        for lower, upper in zip(self.brackets, self.brackets[1:]):
            if lower.max is None:
                raise ValueError(f"{self.name}: only the last bracket may be unbounded ({lower.label})")
            if lower.max <= lower.min:
                raise ValueError(f"{self.name}: bracket {lower.label} is empty or inverted")
            if lower.max != upper.min:
                raise ValueError(
                    f"{self.name}: gap/overlap between {lower.label} and {upper.label}"
                )
        if self.brackets[-1].max is not None:
            raise ValueError(f"{self.name}: last bracket must be unbounded")
        return self


# ---------------------------------------------------------------------------
# CalculationResult: one regime
# ---------------------------------------------------------------------------

class BracketDetail(BaseModel):
    model_config = _FROZEN

    label: str
    taxable_amount: float    # income falling inside this bracket
    rate: float
    amount: float            # tax charged on taxable_amount


class DeductionDetails(BaseModel):
    model_config = _FROZEN

    self_deduction: float
    dependent_deduction: float         # already multiplied by the dependent count
    bracket_details: List[BracketDetail] = []


class CalculationResult(BaseModel):
    """
    Complete PIT computation for one regime.

    Computation sequence:
      1. total_deduction = self + dependents × dependent_deduction
      2. taxable_income  = max(0, gross − insurance − total_deduction)
      3. tax             = Σ bracket amounts (marginal walk)
      4. net             = gross − insurance − tax
      5. (optional) net  = max(0, net − other_costs)
    """
    model_config = _FROZEN

    gross: float
    insurance: float           # employee share only
    taxable_income: float
    tax: float
    net: float
    other_costs: float = 0     # flat post-tax adjustment already taken out of net
    details: DeductionDetails

    @computed_field
    @property
    def income_before_tax(self) -> float:
        return self.gross - self.insurance

    @computed_field
    @property
    def total_deduction(self) -> float:
        return self.details.self_deduction + self.details.dependent_deduction


# ---------------------------------------------------------------------------
# InsuranceResult
# ---------------------------------------------------------------------------

class EmployeeBreakdown(BaseModel):
    model_config = _FROZEN

    social: float          # BHXH 8%
    health: float          # BHYT 1.5%
    unemployment: float    # BHTN 1%


class EmployerBreakdown(BaseModel):
    model_config = _FROZEN

    social: float          # BHXH 17%
    accident: float        # BHTNLĐ-BNN 0.5%
    health: float          # BHYT 3%
    unemployment: float    # BHTN 1%

    @computed_field
    @property
    def total(self) -> float:
        return self.social + self.accident + self.health + self.unemployment


class InsuranceResult(BaseModel):
    """Compulsory insurance for one contribution base. Shared by both regimes."""
    model_config = _FROZEN

    employee: float
    employer: float
    salary_for_social_health: float    # min(base, 20 × national base salary)
    salary_for_unemployment: float     # min(base, 20 × regional minimum wage)
    employee_breakdown: EmployeeBreakdown
    employer_breakdown: EmployerBreakdown


# ---------------------------------------------------------------------------
# Regime Resolver output
# ---------------------------------------------------------------------------

class ResolvedRegimes(BaseModel):
    model_config = _FROZEN

    period: ComparisonPeriod
    region: Region
    insurance_mode: InsuranceMode
    old_config: TaxRegimeConfig
    new_config: TaxRegimeConfig
    effective_region_min_wage: float
    effective_insurance_base: float
    below_minimum: bool    # advisory only; never blocks calculation


# ---------------------------------------------------------------------------
# ComparisonResult: public API of compare_regimes()
# ---------------------------------------------------------------------------

class ComparisonResult(BaseModel):
    """
    Old vs new regime for one SalaryInput.

    net_difference > 0 means the new regime pays more take-home.
    tax_saving > 0 means the new regime charges less PIT.
    """
    model_config = _FROZEN

    old: CalculationResult
    new: CalculationResult
    insurance: InsuranceResult
    resolved: ResolvedRegimes

    net_difference: float            # new.net − old.net
    tax_saving: float                # old.tax − new.tax
    tax_reduction_pct: float         # tax_saving / old.tax × 100 (0 when old.tax == 0)
    employer_total_cost: float       # gross + employer contributions
    better_regime: Literal["old", "new"]
    rationale: str
    warnings: List[str] = []


__all__ = [
    "TaxBracket",
    "TaxRegimeConfig",
    "BracketDetail",
    "DeductionDetails",
    "CalculationResult",
    "EmployeeBreakdown",
    "EmployerBreakdown",
    "InsuranceResult",
    "ResolvedRegimes",
    "ComparisonResult",
]
