"""Step definitions for landing_page_component.feature."""

from __future__ import annotations

from behave import given, then, when

from gui_automation.actions import LandingPageActions


@given("I am on the landing page")
def step_open_landing_page(context):
    context.landing_page_actions = LandingPageActions(context.page, context.base_url)
    context.landing_page_actions.navigate()


@then('the "{card}" card should be visible')
def step_card_visible(context, card):
    assert context.landing_page_actions.is_card_visible(card), f"{card} card should be visible"


@when("I click the {card} card")
def step_click_card(context, card):
    context.landing_page_actions.click_card(card)


@then("the {card} page should be loaded")
def step_card_page_loaded(context, card):
    expected = context.landing_page_actions.card_url(card)
    actual = context.landing_page_actions.get_current_url()
    assert actual == expected, f"Expected {expected}, got {actual}"
