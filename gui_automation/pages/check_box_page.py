"""Check Box page (https://demoqa.com/checkbox) page object.

The page renders a react-checkbox-tree. Node state is read from the icon
classes of each node (``rct-icon-check``, ``rct-icon-parent-open``, ...).
"""

from __future__ import annotations

from .base_page import BasePage


def _title(name: str) -> str:
    return f"//span[@class='rct-title' and text()='{name}']"


class CheckBoxPage(BasePage):
    path = "/checkbox"

    _PAGE_TITLE = "//h1[contains(@class,'text-center') and text()='Check Box']"
    _EXPAND_ALL_BUTTON = "//button[contains(@class,'rct-option-expand-all')]"
    _COLLAPSE_ALL_BUTTON = "//button[contains(@class,'rct-option-collapse-all')]"
    _CHECKED_TITLES = (
        "//span[@class='rct-checkbox' and .//*[contains(@class,'rct-icon-check')]]"
        "/following-sibling::span[@class='rct-title']"
    )
    _PARTIALLY_CHECKED_TITLES = (
        "//span[@class='rct-checkbox' and .//*[contains(@class,'rct-icon-half-check')]]"
        "/following-sibling::span[@class='rct-title']"
    )

    _HOME_NODE = f"{_title('Home')}/ancestor::li[contains(@class,'rct-node-parent')]"
    _HOME_CHECKBOX = "//label[span[@class='rct-title' and text()='Home']]/span[@class='rct-checkbox']"
    _HOME_CHECKBOX_ICON = f"{_HOME_CHECKBOX}//*[name()='svg']"
    _HOME_EXPAND_BUTTON = f"{_title('Home')}/ancestor::li//button[@aria-label='Toggle']"
    _HOME_FOLDER_ICON = "//label[span[@class='rct-title' and text()='Home']]/span[@class='rct-node-icon']"

    @staticmethod
    def checkbox_by_name(name: str) -> str:
        return f"{_title(name)}/preceding-sibling::span[@class='rct-checkbox']"

    @staticmethod
    def folder_icon_by_name(name: str) -> str:
        return f"{_title(name)}/preceding-sibling::span[contains(@class,'rct-node-icon')]"

    @staticmethod
    def toggle_by_name(name: str) -> str:
        return f"//label[span[@class='rct-title' and text()='{name}']]/preceding-sibling::button[@aria-label='Toggle']"

    # ------------------------------------------------------------------
    # Page title
    # ------------------------------------------------------------------

    def is_page_title_visible(self) -> bool:
        return self.util.wait_for_visible(self._PAGE_TITLE) is not None

    def get_page_title_text(self) -> str:
        return self.util.get_text(self._PAGE_TITLE)

    # ------------------------------------------------------------------
    # Expand / collapse
    # ------------------------------------------------------------------

    def click_expand_all(self) -> None:
        self.util.click(self._EXPAND_ALL_BUTTON)

    def click_collapse_all(self) -> None:
        self.util.click(self._COLLAPSE_ALL_BUTTON)

    def expand_folder(self, folder_name: str) -> None:
        if not self.is_folder_expanded(folder_name):
            self.util.click(self.toggle_by_name(folder_name))

    def collapse_folder(self, folder_name: str) -> None:
        if self.is_folder_expanded(folder_name):
            self.util.click(self.toggle_by_name(folder_name))

    def is_folder_expanded(self, folder_name: str) -> bool:
        return self.util.is_folder_expanded(self.folder_icon_by_name(folder_name))

    def is_folder_collapsed(self, folder_name: str) -> bool:
        return self.util.is_folder_collapsed(self.folder_icon_by_name(folder_name))

    def is_expand_all_button_visible(self) -> bool:
        return self.util.wait_for_visible(self._EXPAND_ALL_BUTTON) is not None

    def is_collapse_all_button_visible(self) -> bool:
        return self.util.wait_for_visible(self._COLLAPSE_ALL_BUTTON) is not None

    # ------------------------------------------------------------------
    # Checkboxes
    # ------------------------------------------------------------------

    def click_checkbox(self, name: str) -> None:
        self.util.click(self.checkbox_by_name(name))

    def is_checkbox_checked(self, name: str) -> bool:
        return self.util.is_checkbox_checked(self.checkbox_by_name(name))

    def is_checkbox_partially_checked(self, name: str) -> bool:
        return self.util.is_checkbox_partially_checked(self.checkbox_by_name(name))

    def is_checkbox_visible(self, name: str) -> bool:
        return self.util.wait_for_visible(self.checkbox_by_name(name)) is not None

    def get_all_checked_checkbox_names(self) -> list[str]:
        return self.util.get_all_texts(self._CHECKED_TITLES)

    def get_all_partially_checked_checkbox_names(self) -> list[str]:
        return self.util.get_all_texts(self._PARTIALLY_CHECKED_TITLES)

    def is_subfolder_visible(self, name: str) -> bool:
        return self.util.wait_for_visible(_title(name)) is not None

    # ------------------------------------------------------------------
    # Home node
    # ------------------------------------------------------------------

    def is_home_node_expanded(self) -> bool:
        return "rct-node-expanded" in self.util.get_attribute(self._HOME_NODE, "class")

    def is_home_node_collapsed(self) -> bool:
        return "rct-node-collapsed" in self.util.get_attribute(self._HOME_NODE, "class")

    def is_home_checkbox_unchecked(self) -> bool:
        return "rct-icon-uncheck" in self.util.get_attribute(self._HOME_CHECKBOX_ICON, "class")

    def click_home_expand_icon(self) -> None:
        self.util.click(self._HOME_EXPAND_BUTTON)

    def is_home_expand_icon_visible(self) -> bool:
        return self.util.wait_for_visible(self._HOME_EXPAND_BUTTON) is not None

    def is_home_checkbox_visible(self) -> bool:
        return self.util.wait_for_visible(self._HOME_CHECKBOX) is not None

    def is_home_folder_icon_visible(self) -> bool:
        return self.util.wait_for_visible(self._HOME_FOLDER_ICON) is not None
