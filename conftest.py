"""Root conftest: command-line options and shared fixtures for all test layers."""

from __future__ import annotations

import os
import textwrap
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gui_automation.utils import config


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="run live browser tests against demoqa.com",
    )


@pytest.fixture()
def properties_file(tmp_path: Path) -> Path:
    """Write a small properties file and point the suite config at it."""
    path = tmp_path / "config.properties"
    path.write_text(
        textwrap.dedent("""\
            # test configuration
            base.url=https://demoqa.example/
            browser=firefox
            headless=false
            default.wait.seconds=3
            screenshot.dir=shots/
            empty.key=
        """),
    )
    env = {"DEMOQA_CONFIG": str(path)}
    with patch.dict(os.environ, env):
        # Stray overrides in the developer shell would shadow the file.
        for key in ("base.url", "browser", "headless", "default.wait.seconds", "screenshot.dir", "empty.key"):
            os.environ.pop(config.env_name(key), None)
        config.reload()
        yield path
    config.reload()


@pytest.fixture()
def mock_page() -> MagicMock:
    """A Playwright Page double whose locators resolve to one shared mock."""
    page = MagicMock()
    page.url = "https://demoqa.com/"
    locator = MagicMock()
    locator.count.return_value = 1
    locator.first = locator
    page.locator.return_value = locator
    return page
