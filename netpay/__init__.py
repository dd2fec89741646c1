"""
netpay — Vietnam net-salary engine (PIT + compulsory insurance, current vs proposed regime).

Public entry points re-exported here; the presentation layer needs nothing else.
"""
from netpay.evaluator.insurance import calculate_insurance
from netpay.evaluator.regimes import period_for_date, region_min_wage, resolve_regimes
from netpay.evaluator.tax_engine import apply_other_costs, calculate_tax, compare_regimes
from netpay.inputs.schemas import ComparisonPeriod, InsuranceMode, Region, SalaryInput

__version__ = "0.1.0"

__all__ = [
    "calculate_insurance",
    "calculate_tax",
    "apply_other_costs",
    "resolve_regimes",
    "region_min_wage",
    "period_for_date",
    "compare_regimes",
    "SalaryInput",
    "Region",
    "InsuranceMode",
    "ComparisonPeriod",
]
