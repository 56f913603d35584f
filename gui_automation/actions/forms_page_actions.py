"""Forms section and Practice Form workflows."""

from __future__ import annotations

from playwright.sync_api import Page

from ..pages.forms_page import FormsPage, PracticeFormPage
from ..utils.logging_utils import get_logger
from .base_actions import BaseActions

logger = get_logger("actions.forms")


class FormsPageActions(BaseActions):
    path = FormsPage.path

    def __init__(self, page: Page | None = None, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self.forms_page = FormsPage(self.page, self.base_url)
        self.practice_form_page = PracticeFormPage(self.page, self.base_url)

    def go_to_practice_form(self) -> None:
        logger.info("Opening Practice Form from the Forms menu")
        self.forms_page.go_to_practice_form()

    def fill_practice_form(self, first_name: str, last_name: str, email: str) -> None:
        logger.info("Filling practice form: FirstName=%s, LastName=%s, Email=%s", first_name, last_name, email)
        self.practice_form_page.fill_form(first_name, last_name, email)

    def submit_practice_form(self) -> None:
        logger.info("Submitting practice form")
        self.practice_form_page.submit_form()

    def is_confirmation_visible(self) -> bool:
        return self.practice_form_page.is_confirmation_visible()
