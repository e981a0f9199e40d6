"""Shared test fixtures for the iprint test suite."""

import io

import pytest

from iprint import config as _config_mod
from iprint import depth as _depth_mod
from iprint import guard as _guard_mod
from iprint import output as _output_mod


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _clean_state(monkeypatch):
    """Give every test a fresh config, output singleton and depth 0.

    The indent unit is process-wide and frozen on first use, so each test
    starts unfrozen with the iprint env vars removed.
    """
    monkeypatch.delenv(_config_mod.ENV_INDENT_UNIT, raising=False)
    monkeypatch.delenv(_config_mod.ENV_INDENT_WIDTH, raising=False)
    _config_mod._reset_config()
    old_manager = _output_mod._manager
    _output_mod._manager = None
    depth_token = _depth_mod._depth.set(0)
    live_token = _guard_mod._live.set(())
    yield
    _guard_mod._live.reset(live_token)
    _depth_mod._depth.reset(depth_token)
    _output_mod._manager = old_manager
    _config_mod._reset_config()


# ---------------------------------------------------------------------------
# Output capture
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def unit():
    """The default indent unit (four spaces)."""
    return "    "
