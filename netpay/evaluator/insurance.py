"""
insurance.py — compulsory insurance (BHXH / BHYT / BHTN).
Pure function, no I/O. Same input → same output.

Two independent caps on the contribution base:
  - BHXH + BHYT: min(base, 20 × national base salary)
  - BHTN:        min(base, 20 × regional minimum wage)
"""
from __future__ import annotations

import logging

from netpay.evaluator.rules import (
    CAP_MULTIPLIER,
    EMPLOYEE_RATES,
    EMPLOYER_RATES,
    INSURANCE_CAP_BASE,
)
from netpay.evaluator.schemas import EmployeeBreakdown, EmployerBreakdown, InsuranceResult

logger = logging.getLogger(__name__)


def calculate_insurance(contribution_base: float, region_min_wage: float) -> InsuranceResult:
    """
    Employee and employer contributions for one monthly contribution base.

    A negative base contributes nothing. No exception is raised for any numeric input.
    """
    base = max(0.0, contribution_base)

    salary_for_social_health = min(base, INSURANCE_CAP_BASE)
    salary_for_unemployment = max(0.0, min(base, CAP_MULTIPLIER * region_min_wage))

    employee = EmployeeBreakdown(
        social=salary_for_social_health * EMPLOYEE_RATES["social"],
        health=salary_for_social_health * EMPLOYEE_RATES["health"],
        unemployment=salary_for_unemployment * EMPLOYEE_RATES["unemployment"],
    )
    employer = EmployerBreakdown(
        social=salary_for_social_health * EMPLOYER_RATES["social"],
        accident=salary_for_social_health * EMPLOYER_RATES["accident"],
        health=salary_for_social_health * EMPLOYER_RATES["health"],
        unemployment=salary_for_unemployment * EMPLOYER_RATES["unemployment"],
    )
    employee_total = employee.social + employee.health + employee.unemployment

    logger.debug(
        "Insurance computed capped_social_health=%s capped_unemployment=%s",
        salary_for_social_health < base,
        salary_for_unemployment < base,
    )

    return InsuranceResult(
        employee=employee_total,
        employer=employer.total,
        salary_for_social_health=salary_for_social_health,
        salary_for_unemployment=salary_for_unemployment,
        employee_breakdown=employee,
        employer_breakdown=employer,
    )
