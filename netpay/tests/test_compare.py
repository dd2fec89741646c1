"""
End-to-end tests for compare_regimes() — SalaryInput → resolver → insurance →
tax × 2 → other costs → ComparisonResult.

Expected values come from demo_profiles.py (hand-computed).
Tolerance: ±1 VND.
"""
from __future__ import annotations

import pytest

import netpay
from netpay.evaluator.rules import NEW_TAX_CONFIG, OLD_TAX_CONFIG
from netpay.evaluator.tax_engine import _rationale, calculate_tax, compare_regimes
from netpay.inputs.schemas import SalaryInput
from netpay.tests.demo_profiles import DEMO_PROFILES


# ---------------------------------------------------------------------------
# Test Group 1: demo profiles
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name", list(DEMO_PROFILES))
def test_compare_demo_profiles(name: str) -> None:
    data = DEMO_PROFILES[name]
    expected = data["expected"]

    result = compare_regimes(SalaryInput(**data["input"]))

    assert result.insurance.employee == pytest.approx(expected["insurance"], abs=1), name
    assert result.insurance.employer == pytest.approx(expected["employer"], abs=1), name

    assert result.old.taxable_income == pytest.approx(expected["old_taxable"], abs=1), name
    assert result.old.tax == pytest.approx(expected["old_tax"], abs=1), (
        f"{name}: old tax expected {expected['old_tax']:,.0f}, got {result.old.tax:,.0f}"
    )
    assert result.old.net == pytest.approx(expected["old_net"], abs=1), name

    assert result.new.taxable_income == pytest.approx(expected["new_taxable"], abs=1), name
    assert result.new.tax == pytest.approx(expected["new_tax"], abs=1), (
        f"{name}: new tax expected {expected['new_tax']:,.0f}, got {result.new.tax:,.0f}"
    )
    assert result.new.net == pytest.approx(expected["new_net"], abs=1), name

    assert result.better_regime == expected["better_regime"]
    assert len(result.warnings) == expected["warnings"]


# ---------------------------------------------------------------------------
# Test Group 2: derived figures
# ---------------------------------------------------------------------------

def test_differences_and_employer_cost() -> None:
    result = compare_regimes(SalaryInput(gross=30_000_000, period="before"))

    assert result.net_difference == pytest.approx(26_215_000 - 25_222_500, abs=1)
    assert result.tax_saving == pytest.approx(1_627_500 - 635_000, abs=1)
    assert result.tax_reduction_pct == pytest.approx(992_500 / 1_627_500 * 100, abs=1e-6)
    assert result.employer_total_cost == pytest.approx(36_450_000, abs=1)
    assert "tăng thu nhập thực nhận thêm 992,500 VND" in result.rationale


def test_insurance_shared_by_both_regimes() -> None:
    result = compare_regimes(SalaryInput(gross=75_000_000, dependents=1, region="II"))
    assert result.old.insurance == result.new.insurance == result.insurance.employee


def test_no_tax_rationale_and_zero_reduction() -> None:
    result = compare_regimes(SalaryInput(gross=10_000_000, region="IV"))
    assert result.old.tax == result.new.tax == 0
    assert result.tax_reduction_pct == 0
    assert result.better_regime == "new"
    assert result.rationale == "Không phát sinh thuế TNCN ở cả hai phương án."


def test_rationale_when_current_regime_wins_or_ties() -> None:
    lighter = calculate_tax(30_000_000, 0, NEW_TAX_CONFIG, 3_150_000)
    heavier = calculate_tax(30_000_000, 0, OLD_TAX_CONFIG, 3_150_000)

    text = _rationale(lighter, heavier, heavier.net - lighter.net)
    assert text.startswith("Quy định hiện hành cho thực nhận cao hơn 992,500 VND")

    assert _rationale(heavier, heavier, 0.0) == (
        "Hai phương án cho cùng mức thực nhận (25,222,500 VND)."
    )


def test_resolved_axes_are_reported() -> None:
    result = compare_regimes(SalaryInput(
        gross=40_000_000, region="I", period="before",
        insurance_mode="manual", manual_base=4_000_000,
    ))
    assert result.resolved.below_minimum is True
    assert result.resolved.effective_insurance_base == 4_000_000
    assert result.resolved.effective_region_min_wage == 4_960_000


# ---------------------------------------------------------------------------
# Test Group 3: other costs
# ---------------------------------------------------------------------------

def test_other_costs_applied_to_both_nets() -> None:
    plain = compare_regimes(SalaryInput(gross=30_000_000, period="before"))
    costed = compare_regimes(SalaryInput(gross=30_000_000, period="before", other_costs=500_000))

    assert costed.old.net == pytest.approx(plain.old.net - 500_000, abs=1)
    assert costed.new.net == pytest.approx(plain.new.net - 500_000, abs=1)
    assert costed.old.other_costs == costed.new.other_costs == 500_000
    # tax is unaffected by a post-tax cost
    assert costed.old.tax == plain.old.tax
    assert costed.net_difference == pytest.approx(plain.net_difference, abs=1)


def test_other_costs_exceeding_net_clamps_both_to_zero() -> None:
    result = compare_regimes(SalaryInput(gross=5_000_000, other_costs=10_000_000))
    assert result.old.net == 0
    assert result.new.net == 0
    assert result.net_difference == 0
    assert result.better_regime == "new"
    assert len(result.warnings) == 1


# ---------------------------------------------------------------------------
# Test Group 4: totality and purity
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "kwargs",
    [
        dict(gross=-10_000_000),
        dict(gross=0),
        dict(gross=1_000_000_000, dependents=12),
        dict(gross=30_000_000, dependents=-4),
        dict(gross=30_000_000, dependents="-4"),
        dict(gross="-5000000", other_costs="-1"),
        dict(gross=30_000_000, dependents=1.7),
        dict(gross=30_000_000, insurance_mode="manual", manual_base=-5),
        dict(gross=30_000_000, other_costs=-1),
    ],
)
def test_extreme_inputs_never_raise(kwargs: dict) -> None:
    result = compare_regimes(SalaryInput(**kwargs))
    assert result.old.taxable_income >= 0
    assert result.new.taxable_income >= 0
    assert result.old.net >= 0
    assert result.new.net >= 0


def test_string_negative_dependents_match_zero_dependents() -> None:
    # Form input arrives as text; a negative count must not inflate the tax
    raw = compare_regimes(SalaryInput(gross=30_000_000, dependents="-4", period="before"))
    none = compare_regimes(SalaryInput(gross=30_000_000, dependents=0, period="before"))
    assert raw.old.details.dependent_deduction == 0
    assert raw.old.tax == none.old.tax
    assert raw.new.tax == none.new.tax


def test_compare_is_idempotent() -> None:
    salary = SalaryInput(gross=62_500_000, dependents=2, region="III", other_costs=200_000)
    assert compare_regimes(salary) == compare_regimes(salary)


def test_package_reexports() -> None:
    assert netpay.compare_regimes is compare_regimes
    assert netpay.SalaryInput is SalaryInput
