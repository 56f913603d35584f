"""Test-layer conftest: markers, logging bootstrap and the execution listener."""

from __future__ import annotations

import os

import pytest

from gui_automation.utils import config as suite_config
from gui_automation.utils.logging_utils import configure_logging

from tests.listeners import ExecutionListener


# ---------------------------------------------------------------------------
# Pytest configuration hooks – markers, logging, listener
# ---------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom markers so --strict-markers does not complain."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "e2e: Live browser tests against demoqa.com")
    config.addinivalue_line("markers", "slow: Slow-running tests")

    configure_logging(suite_config.get("log.level", "INFO"), suite_config.get("log.file"))
    config.pluginmanager.register(ExecutionListener(), "demoqa-execution-listener")


def _e2e_enabled(config) -> bool:
    return config.getoption("--run-e2e") or os.environ.get("RUN_E2E") == "1"


def pytest_collection_modifyitems(config, items):
    """Skip live-site tests unless explicitly requested."""
    if _e2e_enabled(config):
        return
    skip_e2e = pytest.mark.skip(reason="live demoqa.com test; use --run-e2e or RUN_E2E=1")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)
