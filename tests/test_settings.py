import pytest

from breakpoints.config.settings import (
    DEBOUNCE_ENV_VAR,
    DEFAULT_DEBOUNCE_MS,
    BreakpointSettings,
    load_settings,
)


def test_defaults():
    assert DEFAULT_DEBOUNCE_MS == 50
    assert load_settings({}).debounce_ms == 50
    assert load_settings({DEBOUNCE_ENV_VAR: "  "}).debounce_ms == 50


def test_env_override():
    assert load_settings({DEBOUNCE_ENV_VAR: "125"}).debounce_ms == 125


def test_env_override_invalid():
    with pytest.raises(ValueError):
        load_settings({DEBOUNCE_ENV_VAR: "fast"})


def test_negative_rejected():
    with pytest.raises(ValueError):
        BreakpointSettings(debounce_ms=-1)
