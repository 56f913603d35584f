"""Elements section workflows."""

from __future__ import annotations

from playwright.sync_api import Page

from ..pages.elements_page import ElementsPage
from ..utils.logging_utils import get_logger
from .base_actions import BaseActions

logger = get_logger("actions.elements")


class ElementsPageActions(BaseActions):
    path = ElementsPage.path

    def __init__(self, page: Page | None = None, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self.elements_page = ElementsPage(self.page, self.base_url)

    def is_menu_item_visible(self, text: str) -> bool:
        logger.info("Checking if menu item '%s' is visible", text)
        return self.elements_page.is_menu_item_visible(text)

    def click_menu_item(self, text: str) -> None:
        logger.info("Clicking menu item '%s'", text)
        self.elements_page.click_menu_item(text)

    def click_menu_item_with_ad_handling(self, text: str) -> None:
        logger.info("Clicking menu item '%s' with ad handling", text)
        self.elements_page.click_menu_item_with_ad_handling(text)

    def click_menu_item_with_ad_and_scroll_handling(self, text: str) -> None:
        logger.info("Clicking menu item '%s' with ad and scroll handling", text)
        self.elements_page.click_menu_item_with_ad_and_scroll_handling(text)
