"""Check Box page workflows."""

from __future__ import annotations

from playwright.sync_api import Page

from ..pages.check_box_page import CheckBoxPage
from ..utils.logging_utils import get_logger
from .base_actions import BaseActions

logger = get_logger("actions.check-box")


class CheckBoxActions(BaseActions):
    path = CheckBoxPage.path

    def __init__(self, page: Page | None = None, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self.check_box_page = CheckBoxPage(self.page, self.base_url)

    # ------------------------------------------------------------------
    # Page title
    # ------------------------------------------------------------------

    def is_page_title_visible(self) -> bool:
        logger.info("Verifying Check Box page title is visible")
        return self.check_box_page.is_page_title_visible()

    def get_page_title_text(self) -> str:
        logger.info("Getting Check Box page title text")
        return self.check_box_page.get_page_title_text()

    # ------------------------------------------------------------------
    # Expand / collapse
    # ------------------------------------------------------------------

    def click_expand_all(self) -> None:
        logger.info("Clicking Expand All button")
        self.check_box_page.click_expand_all()

    def click_collapse_all(self) -> None:
        logger.info("Clicking Collapse All button")
        self.check_box_page.click_collapse_all()

    def expand_folder(self, folder_name: str) -> None:
        logger.info("Expanding folder: %s", folder_name)
        self.check_box_page.expand_folder(folder_name)

    def collapse_folder(self, folder_name: str) -> None:
        logger.info("Collapsing folder: %s", folder_name)
        self.check_box_page.collapse_folder(folder_name)

    def is_folder_expanded(self, folder_name: str) -> bool:
        logger.info("Checking if folder '%s' is expanded", folder_name)
        return self.check_box_page.is_folder_expanded(folder_name)

    def is_folder_collapsed(self, folder_name: str) -> bool:
        logger.info("Checking if folder '%s' is collapsed", folder_name)
        return self.check_box_page.is_folder_collapsed(folder_name)

    def is_expand_all_button_visible(self) -> bool:
        return self.check_box_page.is_expand_all_button_visible()

    def is_collapse_all_button_visible(self) -> bool:
        return self.check_box_page.is_collapse_all_button_visible()

    # ------------------------------------------------------------------
    # Checkboxes
    # ------------------------------------------------------------------

    def click_checkbox(self, name: str) -> None:
        logger.info("Clicking checkbox: %s", name)
        self.check_box_page.click_checkbox(name)

    def is_checkbox_checked(self, name: str) -> bool:
        logger.info("Checking if checkbox '%s' is checked", name)
        return self.check_box_page.is_checkbox_checked(name)

    def is_checkbox_partially_checked(self, name: str) -> bool:
        logger.info("Checking if checkbox '%s' is partially checked", name)
        return self.check_box_page.is_checkbox_partially_checked(name)

    def is_checkbox_visible(self, name: str) -> bool:
        logger.info("Checking if checkbox '%s' is visible", name)
        return self.check_box_page.is_checkbox_visible(name)

    def get_all_checked_checkbox_names(self) -> list[str]:
        logger.info("Getting all checked checkbox names")
        return self.check_box_page.get_all_checked_checkbox_names()

    def get_all_partially_checked_checkbox_names(self) -> list[str]:
        logger.info("Getting all partially checked checkbox names")
        return self.check_box_page.get_all_partially_checked_checkbox_names()

    def is_subfolder_visible(self, name: str) -> bool:
        return self.check_box_page.is_subfolder_visible(name)

    # ------------------------------------------------------------------
    # Home node
    # ------------------------------------------------------------------

    def is_home_node_expanded(self) -> bool:
        return self.check_box_page.is_home_node_expanded()

    def is_home_node_collapsed(self) -> bool:
        return self.check_box_page.is_home_node_collapsed()

    def is_home_checkbox_unchecked(self) -> bool:
        return self.check_box_page.is_home_checkbox_unchecked()

    def click_home_expand_icon(self) -> None:
        logger.info("Clicking Home expand icon")
        self.check_box_page.click_home_expand_icon()

    def is_home_expand_icon_visible(self) -> bool:
        return self.check_box_page.is_home_expand_icon_visible()

    def is_home_checkbox_visible(self) -> bool:
        return self.check_box_page.is_home_checkbox_visible()

    def is_home_folder_icon_visible(self) -> bool:
        return self.check_box_page.is_home_folder_icon_visible()
