# tests/test_defaults.py
import logging

import defaults
from frequency import parse_frequency


def _capture_basic_config(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    return seen


def test_setup_logging_reads_env_level(monkeypatch):
    seen = _capture_basic_config(monkeypatch)
    monkeypatch.setenv(defaults.LOG_LEVEL_ENV, "debug")
    defaults.setup_logging()
    assert seen["level"] == logging.DEBUG


def test_setup_logging_explicit_level_and_bad_name(monkeypatch):
    seen = _capture_basic_config(monkeypatch)
    defaults.setup_logging("INFO")
    assert seen["level"] == logging.INFO
    defaults.setup_logging("chatty")
    assert seen["level"] == logging.WARNING


def test_default_inputs_are_valid():
    assert parse_frequency(defaults.PRICE_DEFAULTS["frequency"]).value == 2
    assert parse_frequency(defaults.YIELD_DEFAULTS["frequency"]).value == 2
    assert defaults.YTM_TOLERANCE == 1e-7
    assert defaults.YTM_MAX_ITER == 100
