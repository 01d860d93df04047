"""Input parameters shared by the depletion solver and the trajectory projector."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from zerocash.config import REAL_GROWTH_TOLERANCE


class ParameterValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class FinancialParameters(BaseModel):
    """
    One calculation's inputs:
      - starting_capital: capital at year 0
      - first_year_withdrawal: expenses withdrawn in year 1, grown by inflation afterwards
      - inflation_rate / growth_rate: fractions (0.03 means 3%)
      - contribution_amount: added at the start of each contribution year (e.g. post-tax salary)
      - contribution_years: how many leading years receive the contribution
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    starting_capital: float
    first_year_withdrawal: float
    inflation_rate: float
    growth_rate: float
    contribution_amount: float = 0.0
    contribution_years: int = 0

    @property
    def real_growth_factor(self) -> float:
        return real_growth_factor(self.growth_rate, self.inflation_rate)

    @property
    def has_contribution_phase(self) -> bool:
        return self.contribution_years > 0


@dataclass
class ParameterReview:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def safe_divide(numerator: float, denominator: float) -> float:
    """Float division that returns inf/nan for a zero denominator instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def real_growth_factor(growth_rate: float, inflation_rate: float) -> float:
    # R > 1 means growth outpaces inflation
    return safe_divide(1 + growth_rate, 1 + inflation_rate)


def is_flat_real_growth(factor: float, tolerance: float = REAL_GROWTH_TOLERANCE) -> bool:
    return abs(factor - 1) < tolerance


def review_parameters(params: FinancialParameters) -> ParameterReview:
    """Collect input problems without raising; callers decide what to reject."""
    review = ParameterReview()

    numbers = {
        "starting capital": params.starting_capital,
        "first year withdrawal": params.first_year_withdrawal,
        "inflation rate": params.inflation_rate,
        "growth rate": params.growth_rate,
        "contribution amount": params.contribution_amount,
    }
    for label, value in numbers.items():
        if not math.isfinite(value):
            review.errors.append(f"{label} must be a finite number")
    if review.errors:
        return review

    if params.starting_capital <= 0:
        review.errors.append("starting capital must be greater than zero")
    if params.first_year_withdrawal < 0:
        review.errors.append("first year withdrawal cannot be negative")
    if params.contribution_amount < 0:
        review.errors.append("contribution amount cannot be negative")
    if params.contribution_years < 0:
        review.errors.append("contribution years cannot be negative")
    if params.growth_rate <= -1:
        review.errors.append("growth rate must be above -100%")
    if params.inflation_rate <= -1:
        review.errors.append("inflation rate must be above -100%")
    if review.errors:
        return review

    if params.first_year_withdrawal == 0:
        review.warnings.append("first year withdrawal is zero")
    if is_flat_real_growth(params.real_growth_factor):
        review.warnings.append("growth and inflation cancel out; depletion is linear")
    if params.contribution_amount > 0 and params.contribution_years == 0:
        review.warnings.append("contribution amount is ignored without contribution years")
    if params.contribution_years > 0 and params.contribution_amount == 0:
        review.warnings.append("contribution years have no contribution amount")

    return review


__all__ = [
    "FinancialParameters",
    "ParameterReview",
    "ParameterValidationError",
    "is_flat_real_growth",
    "real_growth_factor",
    "review_parameters",
    "safe_divide",
]
