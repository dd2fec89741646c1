"""
netpay Tax Engine — Vietnamese personal income tax, current vs proposed regime.
Pure Python, deterministic. Same input → same output.

Flow for one comparison (compare_regimes):
  1. Resolve old/new configs, regional minimum wage and insurance base (regimes.py)
  2. Insurance once, shared by both regimes (insurance.py)
  3. calculate_tax() twice: old config, new config
  4. Subtract flat "other costs" from each net, floored at 0
"""
from __future__ import annotations

import logging

from netpay.evaluator.insurance import calculate_insurance
from netpay.evaluator.regimes import resolve_regimes
from netpay.evaluator.schemas import (
    BracketDetail,
    CalculationResult,
    ComparisonResult,
    DeductionDetails,
    TaxRegimeConfig,
)
from netpay.inputs.schemas import SalaryInput
from netpay.inputs.validator import collect_warnings

logger = logging.getLogger(__name__)


# ===========================================================================
# PROGRESSIVE TAX
# ===========================================================================

def calculate_tax(
    gross: float,
    dependents: int,
    config: TaxRegimeConfig,
    insurance: float,
) -> CalculationResult:
    """
    Progressive PIT for one monthly gross salary under one regime.

    taxable_income is floored at 0, so no input raises. A bracket contributes only
    when taxable_income > bracket.min; the amount inside it is
    min(taxable_income, bracket.max) − bracket.min.

    dependents must already be a non-negative count; it is used as given, so a
    negative value yields a negative dependent deduction. SalaryInput guarantees
    this for compare_regimes().
    """
    self_deduction = config.self_deduction
    dependent_deduction = dependents * config.dependent_deduction
    total_deduction = self_deduction + dependent_deduction

    taxable_income = max(0.0, gross - insurance - total_deduction)

    total_tax = 0.0
    bracket_details: list[BracketDetail] = []
    for bracket in config.brackets:
        if taxable_income <= bracket.min:
            break   # brackets are ascending; nothing above is reached
        upper = float("inf") if bracket.max is None else bracket.max
        amount_in_bracket = min(taxable_income, upper) - bracket.min
        tax_for_bracket = amount_in_bracket * bracket.rate
        total_tax += tax_for_bracket
        bracket_details.append(BracketDetail(
            label=bracket.label,
            taxable_amount=amount_in_bracket,
            rate=bracket.rate,
            amount=tax_for_bracket,
        ))

    return CalculationResult(
        gross=gross,
        insurance=insurance,
        taxable_income=taxable_income,
        tax=total_tax,
        net=gross - insurance - total_tax,
        details=DeductionDetails(
            self_deduction=self_deduction,
            dependent_deduction=dependent_deduction,
            bracket_details=bracket_details,
        ),
    )


def apply_other_costs(result: CalculationResult, other_costs: float) -> CalculationResult:
    """Take a flat post-tax amount out of net, floored at 0. Returns a new result."""
    other_costs = max(0.0, other_costs)
    return result.model_copy(update={
        "net": max(0.0, result.net - other_costs),
        "other_costs": other_costs,
    })


# ===========================================================================
# COMPARE REGIMES: public API
# ===========================================================================

def _rationale(old: CalculationResult, new: CalculationResult, net_difference: float) -> str:
    if old.tax == 0 and new.tax == 0:
        return "Không phát sinh thuế TNCN ở cả hai phương án."
    if net_difference > 0:
        return (
            f"Đề xuất mới tăng thu nhập thực nhận thêm {net_difference:,.0f} VND mỗi tháng. "
            f"Thuế TNCN giảm từ {old.tax:,.0f} xuống {new.tax:,.0f} VND."
        )
    if net_difference < 0:
        return (
            f"Quy định hiện hành cho thực nhận cao hơn {-net_difference:,.0f} VND mỗi tháng. "
            f"Thuế TNCN hiện hành {old.tax:,.0f} VND, theo đề xuất mới {new.tax:,.0f} VND."
        )
    return f"Hai phương án cho cùng mức thực nhận ({new.net:,.0f} VND)."


def compare_regimes(salary_input: SalaryInput) -> ComparisonResult:
    """
    Compare take-home pay under the old and new regimes for one SalaryInput.

    Ties go to the new regime. Advisory warnings are attached, never raised.
    """
    # Step 1: Resolve the two configs and the insurance base
    resolved = resolve_regimes(
        period=salary_input.period,
        region=salary_input.region,
        insurance_mode=salary_input.insurance_mode,
        manual_base=salary_input.manual_base,
        gross=salary_input.gross,
    )

    # Step 2: Insurance, identical for both regimes
    insurance = calculate_insurance(
        resolved.effective_insurance_base,
        resolved.effective_region_min_wage,
    )

    # Step 3: Tax under each regime
    old = calculate_tax(salary_input.gross, salary_input.dependents, resolved.old_config, insurance.employee)
    new = calculate_tax(salary_input.gross, salary_input.dependents, resolved.new_config, insurance.employee)

    # Step 4: Flat post-tax costs, independently per regime
    old = apply_other_costs(old, salary_input.other_costs)
    new = apply_other_costs(new, salary_input.other_costs)

    net_difference = new.net - old.net
    tax_saving = old.tax - new.tax
    tax_reduction_pct = (tax_saving / old.tax * 100) if old.tax else 0.0

    warnings = collect_warnings(salary_input, resolved)

    logger.debug(
        "Compared regimes period=%s old_tax=%.0f new_tax=%.0f warnings=%d",
        resolved.period.value, old.tax, new.tax, len(warnings),
    )

    return ComparisonResult(
        old=old,
        new=new,
        insurance=insurance,
        resolved=resolved,
        net_difference=net_difference,
        tax_saving=tax_saving,
        tax_reduction_pct=tax_reduction_pct,
        employer_total_cost=salary_input.gross + insurance.employer,
        better_regime="old" if net_difference < 0 else "new",
        rationale=_rationale(old, new, net_difference),
        warnings=warnings,
    )
