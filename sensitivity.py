"""
sensitivity.py
Price-sensitivity sweeps for charting: price vs. coupon rate and price vs.
market rate, each over a small window around the current rate with every other
input held fixed.

Usage:
    from sensitivity import price_sensitivity
    df = price_sensitivity(1000, 5.0, 4.0, 5, "semi-annual", vary="market")
"""

from __future__ import annotations
import math

import numpy as np
import pandas as pd

from bonds import BondSpec, price
from defaults import SWEEP_FLOOR, SWEEP_HALF_WIDTH, SWEEP_STEP
from errors import InvalidInput
from frequency import DEFAULT_FREQUENCY, FrequencyLike, parse_frequency


def rate_window(
    center_pct: float,
    half_width: float = SWEEP_HALF_WIDTH,
    step: float = SWEEP_STEP,
    floor: float = SWEEP_FLOOR,
) -> np.ndarray:
    """
    Rates from max(floor, center - half_width) to center + half_width (inclusive),
    stepped by `step`. Built from integer step counts so the end point survives
    float drift.
    """
    if step <= 0 or half_width < 0:
        raise InvalidInput("step must be positive and half_width non-negative")
    start = max(floor, center_pct - half_width)
    stop = center_pct + half_width
    if stop < start:
        return np.empty(0, dtype=float)
    count = int(math.floor((stop - start) / step + 1e-9)) + 1
    return start + step * np.arange(count, dtype=float)


def price_sensitivity(
    face_value: float,
    coupon_rate_pct: float,
    market_rate_pct: float,
    term_years: int,
    frequency: FrequencyLike = DEFAULT_FREQUENCY,
    vary: str = "market",
    half_width: float = SWEEP_HALF_WIDTH,
    step: float = SWEEP_STEP,
    floor: float = SWEEP_FLOOR,
) -> pd.DataFrame:
    """
    Reprice the bond across a window of one rate. Returns columns:
      - rate  (percent, the varied rate)
      - price
    """
    vary = vary.strip().lower()
    if vary not in ("market", "coupon"):
        raise InvalidInput(f"vary must be 'market' or 'coupon', got {vary!r}")

    freq = parse_frequency(frequency)
    center = market_rate_pct if vary == "market" else coupon_rate_pct
    rates = rate_window(center, half_width=half_width, step=step, floor=floor)

    prices = []
    if vary == "market":
        spec = BondSpec(face_value, coupon_rate_pct, term_years, freq)
        for rt in rates:
            prices.append(price(spec, float(rt)).price)
    else:
        for rt in rates:
            spec = BondSpec(face_value, float(rt), term_years, freq)
            prices.append(price(spec, market_rate_pct).price)

    return pd.DataFrame({"rate": rates, "price": np.asarray(prices, dtype=float)})
