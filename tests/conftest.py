# Headless Qt platform for the adapter tests ('qtbot' comes from pytest-qt),
# plus isolation of the process-wide debounce setting between tests.

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _restore_runtime_settings():
    from breakpoints.config.settings import runtime_settings

    saved = runtime_settings.debounce_ms
    yield
    runtime_settings.debounce_ms = saved
