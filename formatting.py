"""
formatting.py
Display helpers layered on top of the raw numeric results. The core always
returns full-precision floats; rounding happens only here.
"""

from __future__ import annotations

from bonds import PriceResult, classify_price, percent_of_par


def format_currency(value: float, symbol: str = "$") -> str:
    """1044.9129 -> '$1,044.91'; negatives as '-$5.00'."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_percent(value_pct: float, decimals: int = 2) -> str:
    """Input is already in percent: 5.263 -> '5.26%'."""
    return f"{value_pct:.{decimals}f}%"


def price_formula(result: PriceResult, face_value: float) -> str:
    """Bond price formula with this calculation's values substituted."""
    n = result.periods_total
    return "\n".join(
        [
            "P = Σ[C / (1 + r)^t] + [F / (1 + r)^n]",
            "",
            "Where:",
            "P = Bond price",
            f"C = {format_currency(result.coupon_payment)} (periodic coupon payment)",
            f"r = {format_percent(result.periodic_market_rate * 100.0)} (periodic market rate)",
            f"F = {format_currency(face_value)} (face value)",
            f"n = {n} (total number of periods)",
            f"t = period number (1 to {n})",
        ]
    )


def bond_status(
    observed_price: float, face_value: float, ytm_pct: float, coupon_rate_pct: float
) -> str:
    """Plain-English discount / premium / par summary for a yield calculation."""
    pct_of_par = percent_of_par(observed_price, face_value)
    ytm_s = format_percent(ytm_pct)
    cpn_s = format_percent(coupon_rate_pct)
    status = classify_price(observed_price, face_value)
    if status == "discount":
        return (
            f"Bond is trading at a discount ({pct_of_par:.1f}% of par). "
            f"YTM ({ytm_s}) is higher than the coupon rate ({cpn_s})."
        )
    if status == "premium":
        return (
            f"Bond is trading at a premium ({pct_of_par:.1f}% of par). "
            f"YTM ({ytm_s}) is lower than the coupon rate ({cpn_s})."
        )
    return f"Bond is trading at par. YTM ({ytm_s}) equals the coupon rate ({cpn_s})."
