"""Data contracts for the zero cash date endpoints."""

from __future__ import annotations

import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from zerocash.config import MAX_HORIZON_YEARS
from zerocash.core.depletion import DepletionResult
from zerocash.core.parameters import FinancialParameters
from zerocash.core.trajectory import YearRecord

_LEADING_NUMBER = re.compile(r"\d*\.?\d*")


def parse_amount(value: Any) -> Any:
    """Read '1,000,000'-style strings the way the form does; other values pass through.

    Everything but digits and dots is dropped and the leading number is kept,
    so an empty or unreadable string becomes 0.
    """
    if not isinstance(value, str):
        return value
    cleaned = re.sub(r"[^0-9.]", "", value)
    number = _LEADING_NUMBER.match(cleaned).group()
    if number in ("", "."):
        return 0.0
    return float(number)


class ParametersRequest(BaseModel):
    """Inputs required to compute a zero cash date."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    starting_capital: float = Field(..., description="Capital at year 0.")
    first_year_withdrawal: float = Field(..., description="Expenses withdrawn in the first year.")
    inflation_rate: float = Field(
        ...,
        description="Annual inflation expressed as a decimal (e.g. 0.03 for 3%).",
    )
    growth_rate: float = Field(
        ...,
        description="Annual portfolio growth expressed as a decimal (e.g. 0.07 for 7%).",
    )
    contribution_amount: float = Field(
        0.0,
        description="Amount added at the start of each contribution year (e.g. post-tax salary).",
    )
    contribution_years: int = Field(
        0,
        ge=0,
        le=MAX_HORIZON_YEARS,
        description="Number of leading years that receive the contribution.",
    )

    @field_validator("starting_capital", "first_year_withdrawal", "contribution_amount", mode="before")
    @classmethod
    def _parse_formatted_amount(cls, value: Any) -> Any:
        return parse_amount(value)

    def to_parameters(self) -> FinancialParameters:
        return FinancialParameters(**self.model_dump())


class ProjectionRequest(BaseModel):
    """Parameters plus the number of years to project."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    parameters: ParametersRequest
    horizon_years: int = Field(..., ge=0, le=MAX_HORIZON_YEARS)


class ProjectionResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    projection: List[YearRecord]


class PlanResponse(BaseModel):
    """Solver result together with the projection charted for it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    result: DepletionResult
    horizon_years: int
    projection: List[YearRecord]
    warnings: List[str] = Field(default_factory=list)
