"""Elements section (https://demoqa.com/elements) page object."""

from __future__ import annotations

from ..utils.click_recovery import click_with_ad_handling, click_with_recovery
from .base_page import BasePage


class ElementsPage(BasePage):
    """Left-hand menu of the Elements section.

    Menu clicks on this page are the ones most often swallowed by ads, so three
    click strategies are offered, from plain to most defensive.
    """

    path = "/elements"

    MENU_ITEMS = {
        "Text Box": "text-box",
        "Check Box": "checkbox",
        "Radio Button": "radio-button",
        "Web Tables": "webtables",
        "Buttons": "buttons",
        "Links": "links",
        "Broken Links - Images": "broken",
        "Upload and Download": "upload-download",
        "Dynamic Properties": "dynamic-properties",
    }

    @staticmethod
    def menu_item_by_text(text: str) -> str:
        return f"//li[contains(@class,'btn') and .//span[contains(@class,'text') and contains(text(), '{text}')]]"

    def is_menu_item_visible(self, text: str) -> bool:
        return self.util.wait_for_visible(self.menu_item_by_text(text)) is not None

    def hide_fixed_banner(self) -> None:
        self.util.hide_fixed_banner()

    def click_menu_item(self, text: str) -> None:
        """Hide the banner and close popups up front, then click once. No scrolling."""
        self.hide_fixed_banner()
        self.util.close_known_popups()
        self.util.click(self.menu_item_by_text(text))

    def click_menu_item_with_ad_handling(self, text: str) -> None:
        """Click; on interception wait out a ``#google_vignette`` ad and click again."""
        click_with_ad_handling(self.util, self.menu_item_by_text(text))

    def click_menu_item_with_ad_and_scroll_handling(self, text: str) -> None:
        """Scroll the item to the centre before each of up to three click attempts.

        Banner and popups are only cleared after a failed attempt.
        """
        click_with_recovery(self.util, self.menu_item_by_text(text), scroll=True)
