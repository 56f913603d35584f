"""Live tests for the Elements section menu."""

from __future__ import annotations

import pytest

from gui_automation.pages import ElementsPage

pytestmark = [pytest.mark.e2e]

MENU_ITEMS = list(ElementsPage.MENU_ITEMS.items())


class TestElementsPageComponent:
    @pytest.mark.parametrize("item", list(ElementsPage.MENU_ITEMS))
    def test_menu_item_visible(self, elements_page_actions, item):
        assert elements_page_actions.is_menu_item_visible(item), f"Menu item '{item}' should be visible"

    @pytest.mark.parametrize("item, suffix", MENU_ITEMS)
    def test_menu_item_navigation(self, elements_page_actions, base_url, item, suffix):
        elements_page_actions.click_menu_item_with_ad_and_scroll_handling(item)
        elements_page_actions.util.wait_for_url(f"**/{suffix}")

        assert elements_page_actions.get_current_url() == f"{base_url}{suffix}"

    def test_menu_item_with_ad_handling(self, elements_page_actions, base_url):
        elements_page_actions.click_menu_item_with_ad_handling("Text Box")
        elements_page_actions.util.wait_for_url("**/text-box")

        assert elements_page_actions.get_current_url() == f"{base_url}text-box"

    def test_back_returns_to_elements(self, elements_page_actions, base_url):
        elements_page_actions.click_menu_item("Buttons")
        elements_page_actions.util.wait_for_url("**/buttons")
        elements_page_actions.go_back()

        assert elements_page_actions.get_current_url() == f"{base_url}elements"
