"""Numeric core: depletion solver and trajectory projector."""

from zerocash.core.depletion import DepletionResult, solve
from zerocash.core.parameters import FinancialParameters, review_parameters
from zerocash.core.trajectory import YearRecord, YearlyProjection, display_horizon, project

__all__ = [
    "DepletionResult",
    "FinancialParameters",
    "YearRecord",
    "YearlyProjection",
    "display_horizon",
    "project",
    "review_parameters",
    "solve",
]
