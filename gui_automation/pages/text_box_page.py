"""Text Box page (https://demoqa.com/text-box) page object."""

from __future__ import annotations

from ..utils.click_recovery import click_with_recovery
from .base_page import BasePage


def _field(field_id: str, tag: str = "input") -> tuple[str, str]:
    """Label and control selectors for one ``<field_id>-wrapper`` row."""
    wrapper = f"//div[@id='{field_id}-wrapper']"
    return f"{wrapper}//label[@id='{field_id}-label']", f"{wrapper}//{tag}[@id='{field_id}']"


class TextBoxPage(BasePage):
    path = "/text-box"

    _PAGE_TITLE = "//h1[contains(@class,'text-center') and text()='Text Box']"
    _FULL_NAME_LABEL, _FULL_NAME_INPUT = _field("userName")
    _EMAIL_LABEL, _EMAIL_INPUT = _field("userEmail")
    _CURRENT_ADDRESS_LABEL, _CURRENT_ADDRESS_INPUT = _field("currentAddress", "textarea")
    _PERMANENT_ADDRESS_LABEL, _PERMANENT_ADDRESS_INPUT = _field("permanentAddress", "textarea")
    _SUBMIT_BUTTON = "//form[@id='userForm']//button[@id='submit']"

    # Output paragraphs rendered after submit
    _OUTPUT_NAME = "//p[@id='name']"
    _OUTPUT_EMAIL = "//p[@id='email']"
    _OUTPUT_CURRENT_ADDRESS = "//p[@id='currentAddress']"
    _OUTPUT_PERMANENT_ADDRESS = "//p[@id='permanentAddress']"

    # ------------------------------------------------------------------
    # Page title
    # ------------------------------------------------------------------

    def is_page_title_visible(self) -> bool:
        return self.util.wait_for_visible(self._PAGE_TITLE) is not None

    def get_page_title_text(self) -> str:
        return self.util.get_text(self._PAGE_TITLE)

    # ------------------------------------------------------------------
    # Full Name
    # ------------------------------------------------------------------

    def is_full_name_label_visible(self) -> bool:
        return self.util.wait_for_visible(self._FULL_NAME_LABEL) is not None

    def get_full_name_label_text(self) -> str:
        return self.util.get_text(self._FULL_NAME_LABEL)

    def is_full_name_visible(self) -> bool:
        return self.util.wait_for_visible(self._FULL_NAME_INPUT) is not None

    def get_full_name_placeholder(self) -> str:
        return self.util.get_attribute(self._FULL_NAME_INPUT, "placeholder")

    def set_full_name(self, name: str) -> None:
        self.util.type(self._FULL_NAME_INPUT, name)

    # ------------------------------------------------------------------
    # Email
    # ------------------------------------------------------------------

    def is_email_label_visible(self) -> bool:
        return self.util.wait_for_visible(self._EMAIL_LABEL) is not None

    def get_email_label_text(self) -> str:
        return self.util.get_text(self._EMAIL_LABEL)

    def is_email_visible(self) -> bool:
        return self.util.wait_for_visible(self._EMAIL_INPUT) is not None

    def get_email_placeholder(self) -> str:
        return self.util.get_attribute(self._EMAIL_INPUT, "placeholder")

    def set_email(self, email: str) -> None:
        self.util.type(self._EMAIL_INPUT, email)

    # ------------------------------------------------------------------
    # Current Address
    # ------------------------------------------------------------------

    def is_current_address_label_visible(self) -> bool:
        return self.util.wait_for_visible(self._CURRENT_ADDRESS_LABEL) is not None

    def get_current_address_label_text(self) -> str:
        return self.util.get_text(self._CURRENT_ADDRESS_LABEL)

    def is_current_address_visible(self) -> bool:
        return self.util.wait_for_visible(self._CURRENT_ADDRESS_INPUT) is not None

    def get_current_address_placeholder(self) -> str:
        return self.util.get_attribute(self._CURRENT_ADDRESS_INPUT, "placeholder")

    def set_current_address(self, address: str) -> None:
        self.util.type(self._CURRENT_ADDRESS_INPUT, address)

    # ------------------------------------------------------------------
    # Permanent Address
    # ------------------------------------------------------------------

    def is_permanent_address_label_visible(self) -> bool:
        return self.util.wait_for_visible(self._PERMANENT_ADDRESS_LABEL) is not None

    def get_permanent_address_label_text(self) -> str:
        return self.util.get_text(self._PERMANENT_ADDRESS_LABEL)

    def is_permanent_address_visible(self) -> bool:
        return self.util.wait_for_visible(self._PERMANENT_ADDRESS_INPUT) is not None

    def get_permanent_address_placeholder(self) -> str:
        return self.util.get_attribute(self._PERMANENT_ADDRESS_INPUT, "placeholder")

    def set_permanent_address(self, address: str) -> None:
        self.util.type(self._PERMANENT_ADDRESS_INPUT, address)

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------

    def is_submit_button_visible(self) -> bool:
        return self.util.wait_for_visible(self._SUBMIT_BUTTON) is not None

    def click_submit(self) -> None:
        """Submit sits below the fold and under the footer ad, so scroll and retry."""
        click_with_recovery(self.util, self._SUBMIT_BUTTON, scroll=True)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def get_submitted_name_output(self) -> str:
        return self.util.get_text(self._OUTPUT_NAME)

    def get_submitted_email_output(self) -> str:
        return self.util.get_text(self._OUTPUT_EMAIL)

    def get_submitted_current_address_output(self) -> str:
        return self.util.get_text(self._OUTPUT_CURRENT_ADDRESS)

    def get_submitted_permanent_address_output(self) -> str:
        return self.util.get_text(self._OUTPUT_PERMANENT_ADDRESS)

    # ------------------------------------------------------------------
    # Empty checks
    # ------------------------------------------------------------------

    def is_full_name_empty(self) -> bool:
        return not self.util.get_attribute(self._FULL_NAME_INPUT, "value")

    def is_email_empty(self) -> bool:
        return not self.util.get_attribute(self._EMAIL_INPUT, "value")

    def is_current_address_empty(self) -> bool:
        return not self.util.get_attribute(self._CURRENT_ADDRESS_INPUT, "value")

    def is_permanent_address_empty(self) -> bool:
        return not self.util.get_attribute(self._PERMANENT_ADDRESS_INPUT, "value")

    def is_output_empty(self) -> bool:
        """True when none of the output paragraphs carries text (or they are absent)."""
        outputs = (self._OUTPUT_NAME, self._OUTPUT_EMAIL, self._OUTPUT_CURRENT_ADDRESS, self._OUTPUT_PERMANENT_ADDRESS)
        return all(not self.util.get_text(selector) for selector in outputs)
