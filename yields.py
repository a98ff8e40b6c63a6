"""
yields.py
----------
Current yield and yield-to-maturity (YTM) for fixed-coupon bonds.

- current_yield: annual coupon income / observed price, in percent
- newton_ytm:    Newton-Raphson on the periodic rate g solving
                 f(g) = sum C/(1+g)^t + F/(1+g)^n - P = 0
- solve_yield:   both of the above, with YTM annualized as g * freq * 100

The solver stops when successive iterates differ by less than `tol`, or after
`max_iter` steps. Hitting the cap returns the last iterate flagged with
converged=False (or raises NonConvergence when strict=True).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import logging
import math

from bonds import BondSpec
from defaults import YTM_MAX_ITER, YTM_TOLERANCE
from errors import DomainError, InvalidInput, NonConvergence, NumericalInstability
from frequency import DEFAULT_FREQUENCY, FrequencyLike, annualize, parse_frequency

logger = logging.getLogger(__name__)

_MAX_HALVINGS = 60


@dataclass(frozen=True)
class RootResult:
    root: float
    iterations: int
    converged: bool


@dataclass(frozen=True)
class YieldResult:
    current_yield: float                        # percent
    ytm: float                                  # annualized percent
    periodic_ytm: float                         # fraction per period
    converged: bool
    iterations: int
    yield_to_worst_call: Optional[float] = None  # not computed by this core


def _check_price(observed_price: float) -> float:
    if isinstance(observed_price, bool) or not isinstance(observed_price, (int, float)):
        raise InvalidInput(f"observed_price must be a number, got {observed_price!r}")
    if not math.isfinite(observed_price) or observed_price <= 0:
        raise DomainError(f"observed_price must be positive and finite, got {observed_price!r}")
    return float(observed_price)


def current_yield(face_value: float, coupon_rate_pct: float, observed_price: float) -> float:
    """Annual coupon payment divided by price, in percent."""
    p = _check_price(observed_price)
    return (face_value * coupon_rate_pct / 100.0) / p * 100.0


def _pv_and_derivative(g: float, coupon: float, face: float, n: int) -> Tuple[float, float]:
    """Present value of all cash flows at periodic rate g, and its derivative in g."""
    base = 1.0 + g
    if base <= 0.0:
        raise NumericalInstability(f"Periodic rate {g!r} makes the discount base non-positive")
    pv = 0.0
    deriv = 0.0
    try:
        for t in range(1, n + 1):
            pv += coupon / base ** t
            deriv -= t * coupon / base ** (t + 1)
        pv += face / base ** n
        deriv -= n * face / base ** (n + 1)
    except (OverflowError, ZeroDivisionError) as exc:
        raise NumericalInstability(f"Overflow evaluating price at g={g!r}: {exc}") from exc
    if not (math.isfinite(pv) and math.isfinite(deriv)):
        raise NumericalInstability(f"Non-finite price or derivative at g={g!r}")
    return pv, deriv


def newton_ytm(
    spec: BondSpec,
    observed_price: float,
    tol: float = YTM_TOLERANCE,
    max_iter: int = YTM_MAX_ITER,
) -> RootResult:
    """
    Newton-Raphson for the periodic yield g. Starts from the current yield
    expressed as a per-period fraction, (coupon% / 100) / (price / face) / freq.
    A step that would push 1 + g to zero or below is halved until the iterate
    stays in the domain.
    """
    p = _check_price(observed_price)
    if max_iter < 1:
        raise InvalidInput("max_iter must be at least 1")

    coupon = spec.coupon_payment
    face = spec.face_value
    n = spec.periods_total

    g = (spec.coupon_rate_pct / 100.0) / (p / face) / spec.frequency.value
    for iteration in range(1, max_iter + 1):
        pv, deriv = _pv_and_derivative(g, coupon, face, n)
        logger.debug("Newton iter %s: g=%s f=%s f'=%s", iteration, g, pv - p, deriv)
        if deriv == 0.0:
            raise NumericalInstability(f"Zero derivative at g={g!r}; Newton step undefined")
        step = (pv - p) / deriv
        if not math.isfinite(step):
            raise NumericalInstability(f"Non-finite Newton step at iteration {iteration}")
        g_new = g - step
        halvings = 0
        while 1.0 + g_new <= 0.0 and halvings < _MAX_HALVINGS:
            step /= 2.0
            g_new = g - step
            halvings += 1
        if halvings:
            logger.debug("Newton step halved %s times to keep 1 + g positive", halvings)
        if 1.0 + g_new <= 0.0 or not math.isfinite(g_new):
            raise NumericalInstability(f"Non-finite Newton iterate after step {iteration}")
        if abs(g_new - g) < tol:
            return RootResult(g_new, iteration, True)
        g = g_new

    logger.warning(
        "YTM did not converge within %s iterations (last periodic estimate %s)", max_iter, g
    )
    return RootResult(g, max_iter, False)


def solve_yield(
    face_value: float,
    coupon_rate_pct: float,
    observed_price: float,
    term_years: int,
    frequency: FrequencyLike = DEFAULT_FREQUENCY,
    *,
    tol: float = YTM_TOLERANCE,
    max_iter: int = YTM_MAX_ITER,
    strict: bool = False,
) -> YieldResult:
    spec = BondSpec(face_value, coupon_rate_pct, term_years, parse_frequency(frequency))
    cy = current_yield(spec.face_value, spec.coupon_rate_pct, observed_price)
    root = newton_ytm(spec, observed_price, tol=tol, max_iter=max_iter)

    result = YieldResult(
        current_yield=cy,
        ytm=annualize(root.root, spec.frequency),
        periodic_ytm=root.root,
        converged=root.converged,
        iterations=root.iterations,
    )
    if strict and not result.converged:
        raise NonConvergence(
            f"YTM did not converge within {max_iter} iterations", result=result
        )
    return result
