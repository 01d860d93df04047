"""Year-by-year replay of the withdraw-then-grow model."""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from zerocash.config import (
    HORIZON_MARGIN_YEARS,
    INFINITE_HORIZON_YEARS,
    MAX_HORIZON_YEARS,
)
from zerocash.core.parameters import FinancialParameters


class YearRecord(BaseModel):
    """
    One projected year. `withdrawal` is the amount due the following year,
    except on the depletion row where it is the withdrawal that failed.
    net_worth mirrors capital_value for the chart series.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    year: int
    withdrawal: float
    capital_value: float
    net_worth: float


YearlyProjection = List[YearRecord]


def _record(year: int, withdrawal: float, capital: float) -> YearRecord:
    return YearRecord(year=year, withdrawal=withdrawal, capital_value=capital, net_worth=capital)


def advance_year(
    params: FinancialParameters,
    year: int,
    capital: float,
    withdrawal: float,
) -> Tuple[float, float, bool]:
    """
    Apply one year of the model and return (capital, withdrawal, depleted).

    Order of operations:
      1) Add the contribution at the START of the year while year <= contribution_years.
      2) Subtract this year's withdrawal.
      3) If capital is at or below zero it is clamped to 0 and the year is the ZCD.
      4) Otherwise grow capital, then grow the withdrawal by inflation for next year.
    """
    if year <= params.contribution_years:
        capital += params.contribution_amount

    capital -= withdrawal
    if capital <= 0:
        return 0.0, withdrawal, True

    capital *= 1 + params.growth_rate
    withdrawal *= 1 + params.inflation_rate
    return capital, withdrawal, False


def project(params: FinancialParameters, horizon_years: int) -> YearlyProjection:
    """
    Build the year-indexed capital/withdrawal table from year 0 to horizon_years.

    The table stops early on the year capital first reaches zero, so its length
    is min(horizon_years, depletion year) + 1. A negative horizon returns only year 0.
    """
    capital = float(params.starting_capital)
    withdrawal = float(params.first_year_withdrawal)

    rows: YearlyProjection = [_record(0, withdrawal, capital)]
    for year in range(1, horizon_years + 1):
        capital, withdrawal, depleted = advance_year(params, year, capital, withdrawal)
        rows.append(_record(year, withdrawal, capital))
        if depleted:
            break

    return rows


def depletion_year(projection: YearlyProjection) -> Optional[int]:
    """Year of the clamped zero row, or None if the table ends with capital left."""
    for row in projection[1:]:
        if row.capital_value == 0:
            return row.year
    return None


def display_horizon(
    years_to_zero: Optional[int],
    margin: int = HORIZON_MARGIN_YEARS,
    infinite_horizon: int = INFINITE_HORIZON_YEARS,
    max_horizon: int = MAX_HORIZON_YEARS,
) -> int:
    """Pick how many years to chart: a few past the ZCD, or a fixed span when capital lasts forever."""
    if years_to_zero is None:
        horizon = infinite_horizon
    else:
        horizon = years_to_zero + margin
    return max(0, min(horizon, max_horizon))


__all__ = [
    "YearRecord",
    "YearlyProjection",
    "advance_year",
    "depletion_year",
    "display_horizon",
    "project",
]
