"""Forms section and Practice Form page objects."""

from __future__ import annotations

from ..utils.click_recovery import click_with_recovery
from .base_page import BasePage


class FormsPage(BasePage):
    path = "/forms"

    # The Forms group is the only expanded menu group on this page.
    _PRACTICE_FORM_MENU = "//div[contains(@class,'element-list') and contains(@class,'show')]//li[@id='item-0']"

    def go_to_practice_form(self) -> None:
        self.util.click(self._PRACTICE_FORM_MENU)
        self.util.wait_for_url(f"**{PracticeFormPage.path}")


class PracticeFormPage(BasePage):
    path = "/automation-practice-form"

    _FIRST_NAME_INPUT = "#firstName"
    _LAST_NAME_INPUT = "#lastName"
    _EMAIL_INPUT = "#userEmail"
    _SUBMIT_BUTTON = "#submit"
    _CONFIRMATION_TITLE = "#example-modal-sizes-title-lg"

    def fill_form(self, first_name: str, last_name: str, email: str) -> None:
        self.util.type(self._FIRST_NAME_INPUT, first_name)
        self.util.type(self._LAST_NAME_INPUT, last_name)
        self.util.type(self._EMAIL_INPUT, email)

    def submit_form(self) -> None:
        click_with_recovery(self.util, self._SUBMIT_BUTTON, scroll=True)

    def is_confirmation_visible(self) -> bool:
        """The "Thanks for submitting the form" modal is shown."""
        return self.util.wait_for_visible(self._CONFIRMATION_TITLE) is not None
