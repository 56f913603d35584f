"""Landing page workflows."""

from __future__ import annotations

from playwright.sync_api import Page

from ..pages.landing_page import LandingPage
from ..utils.logging_utils import get_logger
from .base_actions import BaseActions

logger = get_logger("actions.landing")


class LandingPageActions(BaseActions):
    path = LandingPage.path

    def __init__(self, page: Page | None = None, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self.landing_page = LandingPage(self.page, self.base_url)

    def all_main_cards_visible(self) -> bool:
        logger.info("Checking visibility of all main cards on the landing page")
        return all(self.landing_page.is_card_visible(name) for name in LandingPage.CARDS)

    def is_card_visible(self, name: str) -> bool:
        logger.info("Checking if the '%s' card is visible", name)
        return self.landing_page.is_card_visible(name)

    def click_card(self, name: str) -> None:
        logger.info("Clicking the '%s' card", name)
        self.landing_page.click_card(name)

    def card_url(self, name: str) -> str:
        return self.landing_page.card_url(name)

    def is_elements_card_visible(self) -> bool:
        return self.is_card_visible("Elements")

    def is_forms_card_visible(self) -> bool:
        return self.is_card_visible("Forms")

    def is_alerts_card_visible(self) -> bool:
        return self.is_card_visible("Alerts")

    def is_widgets_card_visible(self) -> bool:
        return self.is_card_visible("Widgets")

    def is_interactions_card_visible(self) -> bool:
        return self.is_card_visible("Interactions")

    def is_book_store_card_visible(self) -> bool:
        return self.is_card_visible("Book Store")

    def click_elements_card(self) -> None:
        self.click_card("Elements")

    def click_forms_card(self) -> None:
        self.click_card("Forms")

    def click_alerts_card(self) -> None:
        self.click_card("Alerts")

    def click_widgets_card(self) -> None:
        self.click_card("Widgets")

    def click_interactions_card(self) -> None:
        self.click_card("Interactions")

    def click_book_store_card(self) -> None:
        self.click_card("Book Store")

    def is_banner_visible(self) -> bool:
        logger.info("Checking if banner is visible")
        return self.landing_page.is_banner_visible()

    def is_join_now_link_present(self) -> bool:
        logger.info("Checking if Join Now link is present")
        return self.landing_page.is_join_now_link_present()

    def click_join_now_link(self) -> None:
        logger.info("Clicking Join Now link")
        self.landing_page.click_join_now_link()

    def is_logo_visible(self) -> bool:
        logger.info("Checking if logo is visible")
        return self.landing_page.is_logo_visible()

    def is_footer_ad_visible(self) -> bool:
        logger.info("Checking if footer ad is visible")
        return self.landing_page.is_footer_ad_visible()

    def is_page_loaded(self) -> bool:
        logger.info("Checking if the landing page is loaded")
        return self.landing_page.is_page_loaded()
