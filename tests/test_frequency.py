# tests/test_frequency.py
import logging

import pytest

from errors import InvalidInput
from frequency import (
    DEFAULT_FREQUENCY,
    PaymentFrequency,
    annualize,
    parse_frequency,
    periodic_rate,
    periods_total,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("annual", PaymentFrequency.ANNUAL),
        ("Semi-Annual", PaymentFrequency.SEMI_ANNUAL),
        ("semiannual", PaymentFrequency.SEMI_ANNUAL),
        (" quarterly ", PaymentFrequency.QUARTERLY),
        ("monthly", PaymentFrequency.MONTHLY),
        (1, PaymentFrequency.ANNUAL),
        (12, PaymentFrequency.MONTHLY),
        (PaymentFrequency.QUARTERLY, PaymentFrequency.QUARTERLY),
    ],
)
def test_parse_frequency_accepts_labels_ints_and_members(value, expected):
    assert parse_frequency(value) is expected


def test_multipliers_and_labels():
    assert [f.value for f in PaymentFrequency] == [1, 2, 4, 12]
    assert [f.label for f in PaymentFrequency] == ["annual", "semi-annual", "quarterly", "monthly"]


@pytest.mark.parametrize("bad", ["weekly", 3, 0, True, None, 2.0])
def test_strict_parse_rejects_unknown(bad):
    with pytest.raises(InvalidInput):
        parse_frequency(bad)


def test_lenient_parse_falls_back_to_semi_annual_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="frequency"):
        freq = parse_frequency("weekly", strict=False)
    assert freq is DEFAULT_FREQUENCY is PaymentFrequency.SEMI_ANNUAL
    assert "weekly" in caplog.text


def test_periods_total():
    assert periods_total(5, PaymentFrequency.SEMI_ANNUAL) == 10
    assert periods_total(3.0, PaymentFrequency.MONTHLY) == 36
    for bad in (0, -1, 1.5, float("inf"), "5"):
        with pytest.raises(InvalidInput):
            periods_total(bad, PaymentFrequency.ANNUAL)


def test_rate_conversions():
    assert abs(periodic_rate(4.0, PaymentFrequency.SEMI_ANNUAL) - 0.02) < 1e-15
    assert abs(periodic_rate(6.0, PaymentFrequency.MONTHLY) - 0.005) < 1e-15
    assert abs(annualize(0.02, PaymentFrequency.SEMI_ANNUAL) - 4.0) < 1e-12
