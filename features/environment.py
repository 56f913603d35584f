"""Behave hooks: one browser session per scenario, screenshot on failure."""

from __future__ import annotations

from pathlib import Path

from behave.model_core import Status

from gui_automation.utils import config, driver_utils
from gui_automation.utils.browser_util import BrowserUtil, generate_random_name_with_timestamp
from gui_automation.utils.logging_utils import configure_logging, get_logger

logger = get_logger("behave")


def before_all(context):
    configure_logging(config.get("log.level", "INFO"), config.get("log.file"))
    context.base_url = config.get_base_url()
    context.browser_name = context.config.userdata.get("browser", config.get("browser", "chrome"))


def before_scenario(context, scenario):
    logger.info("Scenario Started: %s", scenario.name)
    context.page = driver_utils.get_driver(context.browser_name, context.base_url)


def after_scenario(context, scenario):
    if scenario.status == Status.failed and driver_utils.get_page() is not None:
        directory = Path(config.get("screenshot.dir", "screenshots/"))
        path = directory / f"{generate_random_name_with_timestamp()}.png"
        if BrowserUtil(driver_utils.get_page()).screenshot(path):
            logger.info("Screenshot captured: %s", path)
    logger.info("Scenario %s: %s", scenario.status.name, scenario.name)
    driver_utils.quit_driver()
