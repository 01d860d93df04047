"""Closed-form zero cash date (ZCD) solver.

Capital is withdrawn at the start of each year and the remainder grows at the
portfolio rate, while the withdrawal itself grows with inflation. Measured in
first-year money the recurrence is

    a_{n+1} = R * (a_n - B),   R = (1 + growth) / (1 + inflation)

whose fixed point is K = B * R / (R - 1). The distance to K grows by R every
year, which gives the year count in closed form:

    N = floor(1 + log((K - B) / (K - A)) / log(R))

An optional contribution phase is replayed year by year first, and the closed
form is applied to the capital and withdrawal that remain when it ends.

``solve`` is total: degenerate inputs resolve to a defined result instead of
raising.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from zerocash.config import REAL_GROWTH_TOLERANCE
from zerocash.core.parameters import (
    FinancialParameters,
    is_flat_real_growth,
    safe_divide,
)
from zerocash.core.trajectory import advance_year

logger = logging.getLogger(__name__)


class DepletionResult(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    is_infinite: bool
    years_to_zero: Optional[int] = None
    real_growth_rate_percent: float
    spending_rate_percent: float
    sustainable_rate_percent: float
    critical_capital: Optional[float] = None


def _whole_years(estimate: float) -> int:
    # nan, inf and negative estimates only come from degenerate inputs
    if not math.isfinite(estimate) or estimate < 0:
        return 0
    return math.floor(estimate)


def _run_contribution_phase(params: FinancialParameters) -> Tuple[float, float, Optional[int]]:
    """Replay the contribution years; returns (capital, withdrawal, depletion year or None)."""
    capital = float(params.starting_capital)
    withdrawal = float(params.first_year_withdrawal)
    for year in range(1, params.contribution_years + 1):
        capital, withdrawal, depleted = advance_year(params, year, capital, withdrawal)
        if depleted:
            return capital, withdrawal, year
    return capital, withdrawal, None


def critical_capital(withdrawal: float, factor: float) -> float:
    """Capital at which withdrawing and growing returns the same real capital (K)."""
    return safe_divide(withdrawal * factor, factor - 1)


def withdrawal_phase_years(
    capital: float,
    withdrawal: float,
    factor: float,
    tolerance: float = REAL_GROWTH_TOLERANCE,
) -> int:
    """Whole years of withdrawals `capital` funds once contributions have stopped."""
    if factor <= 0 or is_flat_real_growth(factor, tolerance):
        # linear depletion; also covers growth/inflation at or below -100%
        return _whole_years(safe_divide(capital, withdrawal))

    fixed_point = critical_capital(withdrawal, factor)
    if factor > 1 and not fixed_point > capital:
        # at or above K capital never shrinks; the sustainability test should have caught it
        return 0

    # below 1, K is negative and both logarithms are negative
    ratio = safe_divide(fixed_point - withdrawal, fixed_point - capital)
    if not ratio > 0:
        return 0
    return _whole_years(1 + math.log(ratio) / math.log(factor))


def solve(
    params: FinancialParameters,
    tolerance: float = REAL_GROWTH_TOLERANCE,
) -> DepletionResult:
    """Classify the parameters as sustainable forever or depleting, and find the ZCD.

    Args:
        params: Capital, withdrawal, rates and the optional contribution phase.
        tolerance: |R - 1| below which real growth is treated as zero.

    Returns:
        DepletionResult. The reported spending and sustainable rates always
        describe the original inputs, also when a contribution phase changes
        the capital and withdrawal the classification is made on.

    """
    factor = params.real_growth_factor
    sustainable_rate = safe_divide(factor - 1, factor)

    metrics = {
        "real_growth_rate_percent": (factor - 1) * 100,
        "spending_rate_percent": safe_divide(params.first_year_withdrawal, params.starting_capital) * 100,
        "sustainable_rate_percent": sustainable_rate * 100,
    }

    capital, withdrawal, phase_depletion = _run_contribution_phase(params)
    if phase_depletion is not None:
        logger.debug("capital exhausted during contribution year %d", phase_depletion)
        return DepletionResult(is_infinite=False, years_to_zero=phase_depletion, **metrics)

    # compared in percent so the no-contribution case matches the reported rates exactly
    if safe_divide(withdrawal, capital) * 100 < metrics["sustainable_rate_percent"]:
        logger.debug("withdrawal rate below sustainable rate %.6f; capital never runs out", sustainable_rate)
        return DepletionResult(is_infinite=True, **metrics)

    years = withdrawal_phase_years(capital, withdrawal, factor, tolerance)
    fixed_point = critical_capital(withdrawal, factor)
    logger.debug("withdrawal phase lasts %d years (R=%.6f)", years, factor)

    return DepletionResult(
        is_infinite=False,
        years_to_zero=max(params.contribution_years, 0) + years,
        critical_capital=fixed_point if math.isfinite(fixed_point) else None,
        **metrics,
    )


__all__ = [
    "DepletionResult",
    "critical_capital",
    "solve",
    "withdrawal_phase_years",
]
