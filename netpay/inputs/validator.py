"""
Advisory checks on a SalaryInput.

Soft checks only: each returns warning strings, nothing here raises or blocks the
calculation. Rules:
  1. Manual insurance base below the regional minimum wage
  2. Manual insurance base above both caps (caps apply silently)
  3. Manual base supplied while insurance_mode=full (ignored)
  4. Other costs not below gross (both nets floor at 0)
"""
from __future__ import annotations

import logging

from netpay.evaluator.rules import CAP_MULTIPLIER, INSURANCE_CAP_BASE
from netpay.evaluator.schemas import ResolvedRegimes
from netpay.inputs.schemas import InsuranceMode, SalaryInput

logger = logging.getLogger(__name__)


def collect_warnings(salary_input: SalaryInput, resolved: ResolvedRegimes) -> list[str]:
    """
    Collect every advisory warning for one input in a single pass.

    Args:
        salary_input: The clamped input snapshot.
        resolved: Regime Resolver output for the same input.

    Returns:
        list[str]: Vietnamese warnings for display, in rule order; empty when nothing is worth flagging.
    """
    warnings: list[str] = []
    base = resolved.effective_insurance_base
    min_wage = resolved.effective_region_min_wage

    # ---- 1. Below regional minimum wage ------------------------------------
    if resolved.below_minimum:
        warnings.append(
            f"Mức lương đóng bảo hiểm {base:,.0f} VND thấp hơn lương tối thiểu "
            f"vùng {resolved.region.value} ({min_wage:,.0f} VND)."
        )

    if salary_input.insurance_mode is InsuranceMode.manual:
        # ---- 2. Above both caps ---------------------------------------------
        unemployment_cap = CAP_MULTIPLIER * min_wage
        if base > INSURANCE_CAP_BASE and base > unemployment_cap:
            warnings.append(
                f"Mức lương đóng bảo hiểm {base:,.0f} VND vượt cả hai mức trần; "
                f"BHXH/BHYT tính trên {INSURANCE_CAP_BASE:,.0f} VND và "
                f"BHTN tính trên {unemployment_cap:,.0f} VND."
            )
    elif salary_input.manual_base is not None:
        # ---- 3. Manual base ignored ----------------------------------------
        warnings.append(
            "Mức lương đóng bảo hiểm tự khai bị bỏ qua vì đang đóng trên toàn bộ lương gross."
        )

    # ---- 4. Other costs swallow a net ---------------------------------------
    if salary_input.other_costs > 0 and salary_input.other_costs >= salary_input.gross:
        warnings.append(
            f"Chi phí khác {salary_input.other_costs:,.0f} VND không nhỏ hơn lương gross; "
            "lương thực nhận được tính bằng 0."
        )

    if warnings:
        # Count only; salary figures stay out of INFO logs
        logger.info("Advisory warnings raised: %d", len(warnings))
    return warnings
