# tests/test_formatting.py
from bonds import classify_price, price_bond
from formatting import bond_status, format_currency, format_percent, price_formula


def test_format_currency():
    assert format_currency(1044.9129) == "$1,044.91"
    assert format_currency(-5) == "-$5.00"
    assert format_currency(0.0) == "$0.00"


def test_format_percent():
    assert format_percent(5.2631578) == "5.26%"
    assert format_percent(4.0, decimals=1) == "4.0%"


def test_price_formula_substitutes_values():
    res = price_bond(1000, 5.0, 4.0, 5, "semi-annual")
    text = price_formula(res, 1000)
    assert "C = $25.00" in text
    assert "r = 2.00%" in text
    assert "F = $1,000.00" in text
    assert "n = 10" in text
    assert "(1 to 10)" in text


def test_bond_status_messages():
    assert "discount (95.0% of par)" in bond_status(950, 1000, 6.17, 5.0)
    assert "higher than the coupon rate" in bond_status(950, 1000, 6.17, 5.0)
    assert "premium (105.0% of par)" in bond_status(1050, 1000, 3.9, 5.0)
    assert "trading at par" in bond_status(1000, 1000, 5.0, 5.0)


def test_bond_status_agrees_with_price_classification_near_par():
    """A price within rounding of face value is par for both the message and the status kind."""
    near_par = 1000.0 * (1 + 1e-12)
    assert classify_price(near_par, 1000) == "par"
    assert "trading at par" in bond_status(near_par, 1000, 5.0, 5.0)
    assert classify_price(950, 1000) == "discount"
    assert classify_price(1050, 1000) == "premium"
