"""
defaults.py
Calculator defaults, solver/sweep constants, and logging setup.

Library modules only create loggers; handlers are configured once by the
entry point (app.py) through setup_logging().
"""

from __future__ import annotations
from typing import Optional, Union
import logging
import os

# ---------------------------
# Input defaults (Reset buttons)
# ---------------------------
PRICE_DEFAULTS = {
    "face_value": 1000.0,
    "coupon_rate_pct": 5.0,
    "market_rate_pct": 4.0,
    "term_years": 5,
    "frequency": "semi-annual",
}

YIELD_DEFAULTS = {
    "face_value": 1000.0,
    "coupon_rate_pct": 5.0,
    "observed_price": 950.0,
    "term_years": 5,
    "frequency": "semi-annual",
}

# ---------------------------
# Newton-Raphson YTM solver
# ---------------------------
YTM_TOLERANCE = 1e-7   # |g_new - g_prev| on the periodic rate
YTM_MAX_ITER = 100

# ---------------------------
# Sensitivity sweeps (percent)
# ---------------------------
SWEEP_HALF_WIDTH = 3.0
SWEEP_STEP = 0.5
SWEEP_FLOOR = 0.5

# ---------------------------
# Logging
# ---------------------------
LOG_LEVEL_ENV = "BOND_CALC_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """Configure root logging; falls back to $BOND_CALC_LOG_LEVEL, then WARNING."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
