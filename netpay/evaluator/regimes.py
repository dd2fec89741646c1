"""
regimes.py — Regime Resolver.

Picks the two TaxRegimeConfig instances to compare, the regional minimum wage and
the insurance contribution base, from three independent axes:

  period          → DEDUCTION_POLICIES  (which deductions the OLD brackets run with)
  insurance_mode  → BASE_RESOLVERS      (gross vs manual contribution base)
  region × period → REGION_MIN_WAGE     (static lookup)

The NEW side always uses NEW_TAX_CONFIG unmodified. Only the old side is
period-dependent: after the boundary date the question becomes "same new
deductions, old vs new bracket structure".
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Dict, Optional

from netpay.config import settings
from netpay.evaluator.rules import NEW_TAX_CONFIG, OLD_TAX_CONFIG, REGION_MIN_WAGE
from netpay.evaluator.schemas import ResolvedRegimes, TaxRegimeConfig
from netpay.inputs.schemas import ComparisonPeriod, InsuranceMode, Region

logger = logging.getLogger(__name__)


# ===========================================================================
# Period → DeductionPolicy
# ===========================================================================

DeductionPolicy = Callable[[TaxRegimeConfig, TaxRegimeConfig], TaxRegimeConfig]


def _own_deductions(old: TaxRegimeConfig, new: TaxRegimeConfig) -> TaxRegimeConfig:
    return old


def _new_deductions(old: TaxRegimeConfig, new: TaxRegimeConfig) -> TaxRegimeConfig:
    # Copy, never mutate the canonical config
    return old.model_copy(update={
        "name": f"{old.name} (giảm trừ mới)",
        "self_deduction": new.self_deduction,
        "dependent_deduction": new.dependent_deduction,
    })


DEDUCTION_POLICIES: Dict[ComparisonPeriod, DeductionPolicy] = {
    ComparisonPeriod.before: _own_deductions,
    ComparisonPeriod.after: _new_deductions,
}


# ===========================================================================
# InsuranceMode → BaseResolver
# ===========================================================================

BaseResolver = Callable[[float, Optional[float]], float]


def _gross_base(gross: float, manual_base: Optional[float]) -> float:
    return gross


def _manual_base(gross: float, manual_base: Optional[float]) -> float:
    # Manual mode with nothing declared insures on gross
    return gross if manual_base is None else manual_base


BASE_RESOLVERS: Dict[InsuranceMode, BaseResolver] = {
    InsuranceMode.full: _gross_base,
    InsuranceMode.manual: _manual_base,
}


# ===========================================================================
# Lookups
# ===========================================================================

def region_min_wage(region: Region, period: ComparisonPeriod) -> float:
    """Statutory regional minimum wage for a region tier in a comparison period."""
    return REGION_MIN_WAGE[ComparisonPeriod(period)][Region(region)]


def period_for_date(on: Optional[date] = None) -> ComparisonPeriod:
    """Comparison period a calendar date falls in (today when omitted)."""
    on = on or date.today()
    if on < settings.law_change_date:
        return ComparisonPeriod.before
    return ComparisonPeriod.after


# ===========================================================================
# resolve_regimes: public API
# ===========================================================================

def resolve_regimes(
    period: ComparisonPeriod,
    region: Region,
    insurance_mode: InsuranceMode,
    manual_base: Optional[float],
    gross: float,
    old_config: TaxRegimeConfig = OLD_TAX_CONFIG,
    new_config: TaxRegimeConfig = NEW_TAX_CONFIG,
) -> ResolvedRegimes:
    """
    Resolve configs, regional minimum wage and insurance base for one comparison.

    below_minimum is set only in manual mode when the declared base is below the
    regional minimum wage. It is advisory; the base is used as declared.
    """
    period = ComparisonPeriod(period)
    region = Region(region)
    insurance_mode = InsuranceMode(insurance_mode)

    min_wage = region_min_wage(region, period)
    base = max(0.0, BASE_RESOLVERS[insurance_mode](gross, manual_base))
    below_minimum = insurance_mode is InsuranceMode.manual and base < min_wage

    resolved_old = DEDUCTION_POLICIES[period](old_config, new_config)

    logger.debug(
        "Resolved regimes period=%s region=%s mode=%s old=%r below_minimum=%s",
        period.value, region.value, insurance_mode.value, resolved_old.name, below_minimum,
    )

    return ResolvedRegimes(
        period=period,
        region=region,
        insurance_mode=insurance_mode,
        old_config=resolved_old,
        new_config=new_config,
        effective_region_min_wage=min_wage,
        effective_insurance_base=base,
        below_minimum=below_minimum,
    )
