"""
rules.py — statutory constants for Vietnamese PIT and compulsory insurance.

All amounts are VND per month. Loaded once at import; nothing here is mutated.

Sources:
  - National base salary (lương cơ sở) 2,340,000 from 01/07/2024
  - Regional minimum wage: Decree 74/2024 (before boundary), Decree 293/2025 (from 01/01/2026)
  - Old regime: PIT law currently in force (7 brackets, 11M / 4.4M deductions)
  - New regime: proposed PIT law (5 brackets, 15.5M / 6.2M deductions)
"""
from __future__ import annotations

from types import MappingProxyType

from netpay.evaluator.schemas import TaxBracket, TaxRegimeConfig
from netpay.inputs.schemas import ComparisonPeriod, Region

# ===========================================================================
# INSURANCE CAPS
# ===========================================================================

NATIONAL_BASE_SALARY = 2_340_000
CAP_MULTIPLIER = 20

# BHXH + BHYT base is capped at 20 × national base salary
INSURANCE_CAP_BASE = CAP_MULTIPLIER * NATIONAL_BASE_SALARY    # 46,800,000

# ===========================================================================
# CONTRIBUTION RATES
# ===========================================================================

# Employee share: 10.5%
EMPLOYEE_RATES = MappingProxyType({
    "social": 0.08,          # BHXH
    "health": 0.015,         # BHYT
    "unemployment": 0.01,    # BHTN (capped by region)
})

# Employer share: 21.5%
EMPLOYER_RATES = MappingProxyType({
    "social": 0.17,          # BHXH: 14% retirement + 3% sickness/maternity
    "accident": 0.005,       # BHTNLĐ-BNN
    "health": 0.03,          # BHYT
    "unemployment": 0.01,    # BHTN (capped by region)
})

# ===========================================================================
# REGIONAL MINIMUM WAGE PER PERIOD
# ===========================================================================

REGION_MIN_WAGE_BEFORE = MappingProxyType({
    Region.I: 4_960_000,
    Region.II: 4_410_000,
    Region.III: 3_860_000,
    Region.IV: 3_250_000,
})

REGION_MIN_WAGE_AFTER = MappingProxyType({
    Region.I: 5_310_000,
    Region.II: 4_730_000,
    Region.III: 4_140_000,
    Region.IV: 3_700_000,
})

REGION_MIN_WAGE = MappingProxyType({
    ComparisonPeriod.before: REGION_MIN_WAGE_BEFORE,
    ComparisonPeriod.after: REGION_MIN_WAGE_AFTER,
})

# ===========================================================================
# PIT REGIMES
# ===========================================================================

OLD_SELF_DEDUCTION = 11_000_000
OLD_DEPENDENT_DEDUCTION = 4_400_000

NEW_SELF_DEDUCTION = 15_500_000
NEW_DEPENDENT_DEDUCTION = 6_200_000

OLD_TAX_CONFIG = TaxRegimeConfig(
    name="Quy định hiện hành",
    self_deduction=OLD_SELF_DEDUCTION,
    dependent_deduction=OLD_DEPENDENT_DEDUCTION,
    brackets=[
        TaxBracket(min=0,          max=5_000_000,  rate=0.05, label="Đến 5 triệu"),
        TaxBracket(min=5_000_000,  max=10_000_000, rate=0.10, label="5 đến 10 triệu"),
        TaxBracket(min=10_000_000, max=18_000_000, rate=0.15, label="10 đến 18 triệu"),
        TaxBracket(min=18_000_000, max=32_000_000, rate=0.20, label="18 đến 32 triệu"),
        TaxBracket(min=32_000_000, max=52_000_000, rate=0.25, label="32 đến 52 triệu"),
        TaxBracket(min=52_000_000, max=80_000_000, rate=0.30, label="52 đến 80 triệu"),
        TaxBracket(min=80_000_000, max=None,       rate=0.35, label="Trên 80 triệu"),
    ],
)

# Five-bracket table is authoritative: old 30%/35% bands fold into a single 25% top band
NEW_TAX_CONFIG = TaxRegimeConfig(
    name="Đề xuất mới",
    self_deduction=NEW_SELF_DEDUCTION,
    dependent_deduction=NEW_DEPENDENT_DEDUCTION,
    brackets=[
        TaxBracket(min=0,          max=10_000_000, rate=0.05, label="Đến 10 triệu"),
        TaxBracket(min=10_000_000, max=18_000_000, rate=0.10, label="10 đến 18 triệu"),
        TaxBracket(min=18_000_000, max=32_000_000, rate=0.15, label="18 đến 32 triệu"),
        TaxBracket(min=32_000_000, max=52_000_000, rate=0.20, label="32 đến 52 triệu"),
        TaxBracket(min=52_000_000, max=None,       rate=0.25, label="Trên 52 triệu"),
    ],
)


def employee_contribution_ceiling(region_min_wage: float) -> float:
    """Largest possible employee contribution for a given regional minimum wage."""
    return (
        INSURANCE_CAP_BASE * (EMPLOYEE_RATES["social"] + EMPLOYEE_RATES["health"])
        + CAP_MULTIPLIER * region_min_wage * EMPLOYEE_RATES["unemployment"]
    )
