import logging

import numpy as np
import pytest

from rotor_balance import Viewport, ViewportConfig, get_viewport_config, set_viewport_config
from rotor_balance.logging_utils import apply_debug_logging, debug_log_call, summarize
from rotor_balance.model import PolarVector


@pytest.fixture
def restore_config():
    original = get_viewport_config()
    yield
    set_viewport_config(original)


def test_get_viewport_config_returns_copy():
    config = get_viewport_config()
    config.initial_scale = 1.0

    assert get_viewport_config().initial_scale == 50.0


def test_set_viewport_config_applies_to_new_viewports(restore_config):
    set_viewport_config(ViewportConfig(initial_scale=20.0, max_scale=30.0))

    vp = Viewport(200, 200)
    assert vp.scale == 20.0
    for _ in range(10):
        vp.zoom("in")
    assert vp.scale == 30.0


@pytest.mark.parametrize("min_scale, max_scale", [(0.0, 10.0), (-1.0, 10.0), (5.0, 1.0)])
def test_set_viewport_config_rejects_bad_bounds(restore_config, min_scale, max_scale):
    with pytest.raises(ValueError):
        set_viewport_config(ViewportConfig(min_scale=min_scale, max_scale=max_scale))


def test_summarize_shapes():
    assert summarize(0.1 + 0.2) == "0.3"
    assert summarize(PolarVector(1.0, 90.0)) == "PolarVector(r=1, theta_deg=90)"
    assert summarize(np.array([1.0, 2.5])) == "ndarray(1, 2.5)"
    assert summarize(np.zeros((3, 3))) == "ndarray(shape=(3, 3), dtype=float64)"
    assert summarize([1, 2, 3, 4, 5]) == "[1, 2, 3, 4, ...]"


def test_debug_log_call_traces_entry_and_exit(caplog):
    logger = logging.getLogger("rotor_balance.tests.trace")

    @debug_log_call(logger)
    def double(value):
        return value * 2

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert double(2.5) == 5.0

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("-> ") and "double(2.5)" in message for message in messages)
    assert any(message.endswith("= 5") for message in messages)
    assert debug_log_call(logger)(double) is double


def test_debug_log_call_logs_and_reraises(caplog):
    logger = logging.getLogger("rotor_balance.tests.trace")

    @debug_log_call(logger, name="boom")
    def boom():
        raise RuntimeError("nope")

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with pytest.raises(RuntimeError):
            boom()

    assert "!! boom raised" in caplog.text


def test_apply_debug_logging_wraps_public_functions_only():
    def public():
        return 1

    def _private():
        return 2

    def skipped():
        return 3

    namespace = {"__name__": __name__, "public": public, "_private": _private, "skipped": skipped}
    apply_debug_logging(namespace, skip={"skipped"})

    assert getattr(namespace["public"], "_debug_logging_wrapped", False)
    assert namespace["_private"] is _private
    assert namespace["skipped"] is skipped
    assert namespace["public"]() == 1
