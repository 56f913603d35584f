"""Fixtures for live component tests against demoqa.com."""

from __future__ import annotations

import pytest

from gui_automation.actions import (
    CheckBoxActions,
    ElementsPageActions,
    FormsPageActions,
    LandingPageActions,
    TextBoxActions,
)
from gui_automation.utils import config, driver_utils


@pytest.fixture(scope="session")
def base_url():
    """Base URL for the application."""
    return config.get_base_url()


@pytest.fixture(scope="function")
def page(base_url):
    """Open a fresh browser session for each test."""
    page = driver_utils.get_driver(config.get("browser", "chrome"), base_url)
    yield page
    driver_utils.quit_driver()


@pytest.fixture
def landing_page_actions(page, base_url):
    return LandingPageActions(page, base_url)


@pytest.fixture
def elements_page_actions(page, base_url):
    actions = ElementsPageActions(page, base_url)
    actions.navigate()
    return actions


@pytest.fixture
def text_box_actions(page, base_url):
    actions = TextBoxActions(page, base_url)
    actions.navigate()
    return actions


@pytest.fixture
def check_box_actions(page, base_url):
    actions = CheckBoxActions(page, base_url)
    actions.navigate()
    return actions


@pytest.fixture
def forms_page_actions(page, base_url):
    actions = FormsPageActions(page, base_url)
    actions.navigate()
    return actions
