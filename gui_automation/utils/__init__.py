"""Utility helpers for configuration, logging, browser sessions and clicks."""

from .browser_util import BrowserUtil, generate_random_name_with_timestamp
from .click_recovery import click_with_ad_handling, click_with_recovery, dismiss_overlays
from .driver_utils import get_driver, get_page, quit_driver
from .errors import (
    AutomationError,
    ClickInterceptedError,
    ConfigError,
    DriverInitError,
    ElementNotInteractableError,
)
from .logging_utils import configure_logging, get_logger

__all__ = [
    "AutomationError",
    "BrowserUtil",
    "ClickInterceptedError",
    "ConfigError",
    "DriverInitError",
    "ElementNotInteractableError",
    "click_with_ad_handling",
    "click_with_recovery",
    "configure_logging",
    "dismiss_overlays",
    "generate_random_name_with_timestamp",
    "get_driver",
    "get_logger",
    "get_page",
    "quit_driver",
]
