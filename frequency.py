"""
frequency.py
Coupon payment frequencies and the simple periodic-compounding conversions
used across the calculator.

Supported frequencies (periods per year):
- "annual"       1
- "semi-annual"  2
- "quarterly"    4
- "monthly"      12

Unrecognized input raises InvalidInput by default. With strict=False the
documented default (semi-annual) is used instead and a warning is logged.
"""

from __future__ import annotations
from enum import Enum
from typing import Union
import logging
import math

from errors import InvalidInput

logger = logging.getLogger(__name__)


class PaymentFrequency(Enum):
    ANNUAL = 1
    SEMI_ANNUAL = 2
    QUARTERLY = 4
    MONTHLY = 12

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    PaymentFrequency.ANNUAL: "annual",
    PaymentFrequency.SEMI_ANNUAL: "semi-annual",
    PaymentFrequency.QUARTERLY: "quarterly",
    PaymentFrequency.MONTHLY: "monthly",
}

_ALIASES = {
    "annual": PaymentFrequency.ANNUAL,
    "annually": PaymentFrequency.ANNUAL,
    "semi-annual": PaymentFrequency.SEMI_ANNUAL,
    "semiannual": PaymentFrequency.SEMI_ANNUAL,
    "semi_annual": PaymentFrequency.SEMI_ANNUAL,
    "quarterly": PaymentFrequency.QUARTERLY,
    "monthly": PaymentFrequency.MONTHLY,
}

DEFAULT_FREQUENCY = PaymentFrequency.SEMI_ANNUAL

FrequencyLike = Union[PaymentFrequency, int, str]


def parse_frequency(value: FrequencyLike, strict: bool = True) -> PaymentFrequency:
    """
    Resolve an enum member, a periods-per-year integer (1/2/4/12) or a label
    such as "semi-annual" into a PaymentFrequency.
    """
    if isinstance(value, PaymentFrequency):
        return value
    if isinstance(value, str):
        freq = _ALIASES.get(value.strip().lower())
        if freq is not None:
            return freq
    elif isinstance(value, int) and not isinstance(value, bool):
        try:
            return PaymentFrequency(value)
        except ValueError:
            pass

    if strict:
        raise InvalidInput(
            f"Unsupported payment frequency: {value!r} "
            f"(expected one of {', '.join(_LABELS.values())} or 1/2/4/12)"
        )
    logger.warning(
        "Unrecognized payment frequency %r; using default %s", value, DEFAULT_FREQUENCY.label
    )
    return DEFAULT_FREQUENCY


def periods_total(term_years: int, freq: PaymentFrequency) -> int:
    """Total number of coupon periods; term must be a positive whole number of years."""
    if isinstance(term_years, bool) or not isinstance(term_years, (int, float)):
        raise InvalidInput(f"term_years must be a number, got {term_years!r}")
    if not math.isfinite(term_years) or term_years <= 0 or float(term_years) != int(term_years):
        raise InvalidInput(f"term_years must be a positive integer, got {term_years!r}")
    return int(term_years) * freq.value


def periodic_rate(annual_rate_pct: float, freq: PaymentFrequency) -> float:
    """Annual percent (e.g. 5.0) -> periodic fraction (0.025 for semi-annual)."""
    return annual_rate_pct / 100.0 / freq.value


def annualize(periodic: float, freq: PaymentFrequency) -> float:
    """Periodic fraction -> annual percent."""
    return periodic * freq.value * 100.0
