"""
bonds.py
----------
Fixed-coupon bond pricing by discounted-cash-flow summation with flexible coupon
frequencies (annual, semi-annual, quarterly, monthly).

Supports:
- Clean price from an annual market (discount) rate in percent
- Per-period cash-flow breakdown (payment and present value)
- Premium / discount / par classification

Conventions:
- Simple periodic compounding: r = market_rate_pct / 100 / freq
- Whole-year terms only, so the number of periods is term_years * freq
- Rates enter and leave in percent; everything inside is a fraction
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import math

import pandas as pd

from errors import InvalidInput, NumericalInstability
from frequency import (
    DEFAULT_FREQUENCY,
    FrequencyLike,
    PaymentFrequency,
    parse_frequency,
    periodic_rate,
    periods_total,
)


# ---------------------------
# Value types
# ---------------------------

def _require_finite(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class BondSpec:
    face_value: float          # Principal repaid at maturity
    coupon_rate_pct: float     # Annual coupon rate in percent (e.g. 5.0)
    term_years: int            # Whole years to maturity
    frequency: PaymentFrequency = DEFAULT_FREQUENCY

    def __post_init__(self):
        face = _require_finite("face_value", self.face_value)
        coupon = _require_finite("coupon_rate_pct", self.coupon_rate_pct)
        if face <= 0:
            raise InvalidInput(f"face_value must be positive, got {self.face_value!r}")
        if coupon < 0:
            raise InvalidInput(f"coupon_rate_pct must be non-negative, got {self.coupon_rate_pct!r}")
        freq = parse_frequency(self.frequency)
        n = periods_total(self.term_years, freq)
        object.__setattr__(self, "face_value", face)
        object.__setattr__(self, "coupon_rate_pct", coupon)
        object.__setattr__(self, "term_years", n // freq.value)
        object.__setattr__(self, "frequency", freq)

    @property
    def periods_total(self) -> int:
        return self.term_years * self.frequency.value

    @property
    def periodic_coupon_rate(self) -> float:
        return periodic_rate(self.coupon_rate_pct, self.frequency)

    @property
    def coupon_payment(self) -> float:
        """Coupon paid each period."""
        return self.face_value * self.periodic_coupon_rate


@dataclass(frozen=True)
class CashFlowEntry:
    period: int
    payment: float
    present_value: float


@dataclass(frozen=True)
class PriceResult:
    price: float
    pv_coupons: float
    pv_face: float
    cash_flows: Tuple[CashFlowEntry, ...]
    periods_total: int
    coupon_payment: float
    periodic_market_rate: float

    def as_dataframe(self) -> pd.DataFrame:
        """Cash-flow table with one row per coupon period."""
        return pd.DataFrame(
            {
                "Period": [cf.period for cf in self.cash_flows],
                "Payment": [cf.payment for cf in self.cash_flows],
                "Present Value": [cf.present_value for cf in self.cash_flows],
            }
        )


# ---------------------------
# Pricing
# ---------------------------

def _discount(amount: float, base: float, t: int) -> float:
    try:
        value = amount / (base ** t)
    except (OverflowError, ZeroDivisionError) as exc:
        raise NumericalInstability(f"Discounting failed at period {t}: {exc}") from exc
    if not math.isfinite(value):
        raise NumericalInstability(f"Non-finite present value at period {t}")
    return value


def price(spec: BondSpec, market_rate_pct: float) -> PriceResult:
    """
    Price = sum_{t=1..n} C / (1 + r)^t + F / (1 + r)^n
    with r the periodic market rate and C the periodic coupon payment.
    """
    market = _require_finite("market_rate_pct", market_rate_pct)
    if market < 0:
        raise InvalidInput(f"market_rate_pct must be non-negative, got {market_rate_pct!r}")

    n = spec.periods_total
    c = spec.coupon_payment
    r = periodic_rate(market, spec.frequency)
    base = 1.0 + r

    flows: List[CashFlowEntry] = []
    for t in range(1, n + 1):
        flows.append(CashFlowEntry(period=t, payment=c, present_value=_discount(c, base, t)))

    pv_coupons = math.fsum(cf.present_value for cf in flows)
    pv_face = _discount(spec.face_value, base, n)
    total = pv_coupons + pv_face
    if not math.isfinite(total):
        raise NumericalInstability("Bond price is not finite")

    return PriceResult(
        price=total,
        pv_coupons=pv_coupons,
        pv_face=pv_face,
        cash_flows=tuple(flows),
        periods_total=n,
        coupon_payment=c,
        periodic_market_rate=r,
    )


def price_bond(
    face_value: float,
    coupon_rate_pct: float,
    market_rate_pct: float,
    term_years: int,
    frequency: FrequencyLike = DEFAULT_FREQUENCY,
) -> PriceResult:
    spec = BondSpec(face_value, coupon_rate_pct, term_years, parse_frequency(frequency))
    return price(spec, market_rate_pct)


def percent_of_par(price_value: float, face_value: float) -> float:
    """Price as a percentage of face value (100.0 at par)."""
    if face_value <= 0:
        raise InvalidInput(f"face_value must be positive, got {face_value!r}")
    return price_value / face_value * 100.0


def classify_price(price_value: float, face_value: float, rel_tol: float = 1e-9) -> str:
    """'premium', 'discount' or 'par' relative to face value."""
    if math.isclose(price_value, face_value, rel_tol=rel_tol):
        return "par"
    return "premium" if price_value > face_value else "discount"
