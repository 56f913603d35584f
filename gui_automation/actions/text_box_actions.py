"""Text Box page workflows."""

from __future__ import annotations

from playwright.sync_api import Page

from ..pages.text_box_page import TextBoxPage
from ..utils.logging_utils import get_logger
from .base_actions import BaseActions

logger = get_logger("actions.text-box")


class TextBoxActions(BaseActions):
    path = TextBoxPage.path

    def __init__(self, page: Page | None = None, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self.text_box_page = TextBoxPage(self.page, self.base_url)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def enter_full_name(self, name: str) -> None:
        logger.info("Entering Full Name: %s", name)
        self.text_box_page.set_full_name(name)

    def enter_email(self, email: str) -> None:
        logger.info("Entering Email: %s", email)
        self.text_box_page.set_email(email)

    def enter_current_address(self, address: str) -> None:
        logger.info("Entering Current Address: %s", address)
        self.text_box_page.set_current_address(address)

    def enter_permanent_address(self, address: str) -> None:
        logger.info("Entering Permanent Address: %s", address)
        self.text_box_page.set_permanent_address(address)

    def click_submit(self) -> None:
        logger.info("Clicking Submit button")
        self.text_box_page.click_submit()

    def fill_form(self, name: str, email: str, current_address: str, permanent_address: str) -> None:
        """Fill all four fields and submit."""
        logger.info(
            "Filling form with: Name=%s, Email=%s, CurrentAddress=%s, PermanentAddress=%s",
            name,
            email,
            current_address,
            permanent_address,
        )
        self.enter_full_name(name)
        self.enter_email(email)
        self.enter_current_address(current_address)
        self.enter_permanent_address(permanent_address)
        self.click_submit()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def get_submitted_name_output(self) -> str:
        value = self.text_box_page.get_submitted_name_output()
        logger.info("Output Name after submit: %s", value)
        return value

    def get_submitted_email_output(self) -> str:
        value = self.text_box_page.get_submitted_email_output()
        logger.info("Output Email after submit: %s", value)
        return value

    def get_submitted_current_address_output(self) -> str:
        value = self.text_box_page.get_submitted_current_address_output()
        logger.info("Output Current Address after submit: %s", value)
        return value

    def get_submitted_permanent_address_output(self) -> str:
        value = self.text_box_page.get_submitted_permanent_address_output()
        logger.info("Output Permanent Address after submit: %s", value)
        return value

    # ------------------------------------------------------------------
    # Visibility, labels, placeholders, empty checks
    # ------------------------------------------------------------------

    def is_page_title_visible(self) -> bool:
        return self.text_box_page.is_page_title_visible()

    def get_page_title_text(self) -> str:
        return self.text_box_page.get_page_title_text()

    def is_full_name_label_visible(self) -> bool:
        return self.text_box_page.is_full_name_label_visible()

    def get_full_name_label_text(self) -> str:
        return self.text_box_page.get_full_name_label_text()

    def is_full_name_field_visible(self) -> bool:
        return self.text_box_page.is_full_name_visible()

    def get_full_name_placeholder(self) -> str:
        return self.text_box_page.get_full_name_placeholder()

    def is_email_label_visible(self) -> bool:
        return self.text_box_page.is_email_label_visible()

    def get_email_label_text(self) -> str:
        return self.text_box_page.get_email_label_text()

    def is_email_field_visible(self) -> bool:
        return self.text_box_page.is_email_visible()

    def get_email_placeholder(self) -> str:
        return self.text_box_page.get_email_placeholder()

    def is_current_address_label_visible(self) -> bool:
        return self.text_box_page.is_current_address_label_visible()

    def get_current_address_label_text(self) -> str:
        return self.text_box_page.get_current_address_label_text()

    def is_current_address_field_visible(self) -> bool:
        return self.text_box_page.is_current_address_visible()

    def get_current_address_placeholder(self) -> str:
        return self.text_box_page.get_current_address_placeholder()

    def is_permanent_address_label_visible(self) -> bool:
        return self.text_box_page.is_permanent_address_label_visible()

    def get_permanent_address_label_text(self) -> str:
        return self.text_box_page.get_permanent_address_label_text()

    def is_permanent_address_field_visible(self) -> bool:
        return self.text_box_page.is_permanent_address_visible()

    def get_permanent_address_placeholder(self) -> str:
        return self.text_box_page.get_permanent_address_placeholder()

    def is_submit_button_visible(self) -> bool:
        return self.text_box_page.is_submit_button_visible()

    def is_full_name_empty(self) -> bool:
        return self.text_box_page.is_full_name_empty()

    def is_email_empty(self) -> bool:
        return self.text_box_page.is_email_empty()

    def is_current_address_empty(self) -> bool:
        return self.text_box_page.is_current_address_empty()

    def is_permanent_address_empty(self) -> bool:
        return self.text_box_page.is_permanent_address_empty()

    def is_output_empty(self) -> bool:
        return self.text_box_page.is_output_empty()
