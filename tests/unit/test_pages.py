"""Unit tests for the demoqa.com page objects against a mocked Page."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from gui_automation.pages import (
    CheckBoxPage,
    ElementsPage,
    FormsPage,
    LandingPage,
    PracticeFormPage,
    TextBoxPage,
)

BASE = "https://demoqa.com"


@pytest.mark.unit
class TestLandingPage:
    """Verify card name resolution and card clicks."""

    @pytest.mark.parametrize(
        "name, title",
        [
            ("Elements", "Elements"),
            ("Alerts", "Alerts, Frame & Windows"),
            ("Alerts, Frame & Windows", "Alerts, Frame & Windows"),
            ("Book Store", "Book Store Application"),
        ],
    )
    def test_card_title_aliases(self, name, title):
        assert LandingPage.card_title(name) == title

    def test_unknown_card(self):
        with pytest.raises(ValueError, match="Unknown card: Games"):
            LandingPage.card_title("Games")

    def test_card_url(self, mock_page):
        landing = LandingPage(mock_page, BASE)
        assert landing.card_url("Interactions") == "https://demoqa.com/interaction"
        assert landing.card_url("Book Store") == "https://demoqa.com/books"

    def test_click_card_waits_for_target_url(self, mock_page):
        landing = LandingPage(mock_page, BASE)
        landing.click_elements_card()

        mock_page.locator.return_value.click.assert_called_once()
        assert mock_page.wait_for_url.call_args[0][0] == "**/elements"

    def test_card_not_visible(self, mock_page):
        mock_page.locator.return_value.wait_for.side_effect = PlaywrightTimeoutError("Timeout")
        landing = LandingPage(mock_page, BASE)
        assert landing.is_forms_card_visible() is False

    def test_card_selector_names_title(self, mock_page):
        LandingPage(mock_page, BASE).is_card_visible("Widgets")
        assert "h5[text()='Widgets']" in mock_page.locator.call_args[0][0]


@pytest.mark.unit
class TestElementsPage:
    """Verify the three menu click strategies."""

    def test_menu_item_selector(self):
        assert "contains(text(), 'Web Tables')" in ElementsPage.menu_item_by_text("Web Tables")

    def test_plain_click_clears_overlays_first(self, mock_page):
        elements = ElementsPage(mock_page, BASE)
        elements.click_menu_item("Text Box")

        mock_page.evaluate.assert_called_once()
        assert mock_page.locator.call_args[0][0] == ElementsPage.menu_item_by_text("Text Box")

    def test_ad_handling_variant(self, mock_page):
        elements = ElementsPage(mock_page, BASE)
        with patch("gui_automation.pages.elements_page.click_with_ad_handling") as click:
            elements.click_menu_item_with_ad_handling("Buttons")
        click.assert_called_once_with(elements.util, ElementsPage.menu_item_by_text("Buttons"))

    def test_scroll_variant(self, mock_page):
        elements = ElementsPage(mock_page, BASE)
        with patch("gui_automation.pages.elements_page.click_with_recovery") as click:
            elements.click_menu_item_with_ad_and_scroll_handling("Links")
        click.assert_called_once_with(elements.util, ElementsPage.menu_item_by_text("Links"), scroll=True)

    def test_every_menu_item_has_url_suffix(self):
        assert ElementsPage.MENU_ITEMS["Text Box"] == "text-box"
        assert all(suffix for suffix in ElementsPage.MENU_ITEMS.values())


@pytest.mark.unit
class TestTextBoxPage:
    def test_path(self, mock_page):
        assert TextBoxPage(mock_page, BASE).url == "https://demoqa.com/text-box"

    def test_set_full_name(self, mock_page):
        TextBoxPage(mock_page, BASE).set_full_name("Husny")

        assert "userName" in mock_page.locator.call_args[0][0]
        mock_page.locator.return_value.fill.assert_called_once_with("Husny")

    def test_placeholder(self, mock_page):
        mock_page.locator.return_value.get_attribute.return_value = "name@example.com"
        assert TextBoxPage(mock_page, BASE).get_email_placeholder() == "name@example.com"

    def test_field_empty_reads_live_value(self, mock_page):
        mock_page.locator.return_value.input_value.return_value = ""
        assert TextBoxPage(mock_page, BASE).is_current_address_empty() is True

    def test_output_empty_when_absent(self, mock_page):
        mock_page.locator.return_value.count.return_value = 0
        assert TextBoxPage(mock_page, BASE).is_output_empty() is True

    def test_output_not_empty_after_submit(self, mock_page):
        mock_page.locator.return_value.inner_text.return_value = "Name:Husny"
        assert TextBoxPage(mock_page, BASE).is_output_empty() is False

    def test_submit_scrolls_and_retries(self, mock_page):
        text_box = TextBoxPage(mock_page, BASE)
        with patch("gui_automation.pages.text_box_page.click_with_recovery") as click:
            text_box.click_submit()
        assert click.call_args.kwargs == {"scroll": True}
        assert "submit" in click.call_args[0][1]


@pytest.mark.unit
class TestCheckBoxPage:
    """Verify folder toggling only clicks when state must change."""

    @staticmethod
    def _icon(mock_page, classes):
        mock_page.locator.return_value.locator.return_value.first.get_attribute.return_value = classes

    def test_expand_collapsed_folder(self, mock_page):
        self._icon(mock_page, "rct-icon rct-icon-parent-close")
        CheckBoxPage(mock_page, BASE).expand_folder("Desktop")

        mock_page.locator.return_value.click.assert_called_once()
        assert mock_page.locator.call_args[0][0] == CheckBoxPage.toggle_by_name("Desktop")

    def test_expand_already_open_folder_is_noop(self, mock_page):
        self._icon(mock_page, "rct-icon rct-icon-parent-open")
        CheckBoxPage(mock_page, BASE).expand_folder("Desktop")
        mock_page.locator.return_value.click.assert_not_called()

    def test_collapse_open_folder(self, mock_page):
        self._icon(mock_page, "rct-icon rct-icon-parent-open")
        CheckBoxPage(mock_page, BASE).collapse_folder("Documents")
        mock_page.locator.return_value.click.assert_called_once()

    def test_checkbox_state(self, mock_page):
        self._icon(mock_page, "rct-icon rct-icon-half-check")
        check_box = CheckBoxPage(mock_page, BASE)

        assert check_box.is_checkbox_partially_checked("Home") is True
        assert check_box.is_checkbox_checked("Home") is False

    def test_checked_names(self, mock_page):
        mock_page.locator.return_value.all_inner_texts.return_value = ["Home", " Desktop "]
        assert CheckBoxPage(mock_page, BASE).get_all_checked_checkbox_names() == ["Home", "Desktop"]

    def test_home_node_expanded_from_class(self, mock_page):
        mock_page.locator.return_value.get_attribute.return_value = "rct-node rct-node-parent rct-node-expanded"
        check_box = CheckBoxPage(mock_page, BASE)

        assert check_box.is_home_node_expanded() is True
        assert check_box.is_home_node_collapsed() is False


@pytest.mark.unit
class TestFormsPages:
    def test_go_to_practice_form(self, mock_page):
        FormsPage(mock_page, BASE).go_to_practice_form()

        mock_page.locator.return_value.click.assert_called_once()
        assert mock_page.wait_for_url.call_args[0][0] == "**/automation-practice-form"

    def test_fill_form(self, mock_page):
        PracticeFormPage(mock_page, BASE).fill_form("Ada", "Lovelace", "ada@example.com")

        fills = [c.args[0] for c in mock_page.locator.return_value.fill.call_args_list]
        assert fills == ["Ada", "Lovelace", "ada@example.com"]

    def test_submit_uses_recovery(self, mock_page):
        form = PracticeFormPage(mock_page, BASE)
        with patch("gui_automation.pages.forms_page.click_with_recovery") as click:
            form.submit_form()
        click.assert_called_once_with(form.util, "#submit", scroll=True)
