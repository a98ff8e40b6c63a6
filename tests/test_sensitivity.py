# tests/test_sensitivity.py
import numpy as np
import pytest

from bonds import price_bond
from errors import InvalidInput
from sensitivity import price_sensitivity, rate_window


def test_rate_window_centered():
    rates = rate_window(5.0)
    assert np.allclose(rates, np.arange(2.0, 8.01, 0.5))
    assert rates[0] == 2.0 and rates[-1] == 8.0


def test_rate_window_floored_at_half_percent():
    rates = rate_window(1.0)
    assert rates[0] == 0.5
    assert rates[-1] == 4.0
    assert len(rates) == 8


def test_rate_window_keeps_end_point_with_odd_center():
    rates = rate_window(4.3)
    assert abs(rates[0] - 1.3) < 1e-12
    assert abs(rates[-1] - 7.3) < 1e-12


def test_rate_window_rejects_bad_step():
    with pytest.raises(InvalidInput):
        rate_window(5.0, step=0.0)


def test_market_sweep_decreasing_and_matches_pricer():
    df = price_sensitivity(1000, 5.0, 4.0, 5, "semi-annual", vary="market")
    assert list(df.columns) == ["rate", "price"]
    assert np.all(np.diff(df["price"].to_numpy()) < 0)
    row = df.loc[np.isclose(df["rate"], 4.0)].iloc[0]
    assert abs(row["price"] - price_bond(1000, 5.0, 4.0, 5, "semi-annual").price) < 1e-9


def test_coupon_sweep_increasing_and_par_at_market_rate():
    df = price_sensitivity(1000, 5.0, 4.0, 5, "quarterly", vary="coupon")
    assert np.all(np.diff(df["price"].to_numpy()) > 0)
    par_row = df.loc[np.isclose(df["rate"], 4.0)].iloc[0]
    assert abs(par_row["price"] - 1000.0) < 1e-6


def test_unknown_axis_raises():
    with pytest.raises(InvalidInput):
        price_sensitivity(1000, 5.0, 4.0, 5, "annual", vary="term")
