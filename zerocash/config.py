"""Defaults and tunables for the zero cash date service."""

from __future__ import annotations

import os

# Initial values of the calculator form
DEFAULT_PARAMETERS = {
    "starting_capital": 1_000_000.0,
    "first_year_withdrawal": 50_000.0,
    "inflation_rate": 0.03,
    "growth_rate": 0.07,
    "contribution_amount": 75_000.0,
    "contribution_years": 10,
}

# |R - 1| below this is treated as zero real growth (linear depletion)
REAL_GROWTH_TOLERANCE = 1e-4

# Display horizon: years shown past a finite ZCD, and the fixed horizon used
# when capital never runs out
HORIZON_MARGIN_YEARS = 5
INFINITE_HORIZON_YEARS = 50
MAX_HORIZON_YEARS = 500

CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


class DefaultConfig:
    """Flask settings loaded by ``create_app``."""

    CORS_ORIGINS = CORS_ORIGINS
    MAX_HORIZON_YEARS = MAX_HORIZON_YEARS
    LOG_LEVEL = os.environ.get("ZEROCASH_LOG_LEVEL", "INFO")
