"""Step definitions for text_box_component.feature."""

from __future__ import annotations

from behave import given, then, when

from gui_automation.actions import TextBoxActions

# Field name used in the feature files -> method stem on TextBoxActions
FIELDS = {
    "Full Name": "full_name",
    "Email": "email",
    "Current Address": "current_address",
    "Permanent Address": "permanent_address",
}


def _field_call(context, field, template):
    try:
        stem = FIELDS[field]
    except KeyError:
        raise ValueError(f"Unknown text box field: {field}") from None
    return getattr(context.text_box_actions, template.format(stem))()


@given("I am on the text box page")
def step_open_text_box_page(context):
    context.text_box_actions = TextBoxActions(context.page, context.base_url)
    context.text_box_actions.navigate()


@then("the page title should be visible")
def step_title_visible(context):
    assert context.text_box_actions.is_page_title_visible(), "Page title should be visible"


@then('the page title should be "{expected}"')
def step_title_text(context, expected):
    assert context.text_box_actions.get_page_title_text() == expected


@then("the {field} label should be visible")
def step_label_visible(context, field):
    assert _field_call(context, field, "is_{}_label_visible"), f"{field} label should be visible"


@then('the {field} label text should be "{expected}"')
def step_label_text(context, field, expected):
    assert _field_call(context, field, "get_{}_label_text") == expected


@then("the {field} field should be visible")
def step_field_visible(context, field):
    assert _field_call(context, field, "is_{}_field_visible"), f"{field} field should be visible"


@then('the {field} placeholder should be "{expected}"')
def step_placeholder(context, field, expected):
    assert _field_call(context, field, "get_{}_placeholder") == expected


@then("the Submit button should be visible")
def step_submit_visible(context):
    assert context.text_box_actions.is_submit_button_visible(), "Submit button should be visible"


@when('I fill the form with name "{name}", email "{email}", current address "{current}", permanent address "{permanent}"')
def step_fill_form(context, name, email, current, permanent):
    context.text_box_actions.fill_form(name, email, current, permanent)


@then(
    'the output should contain name "{name}", email "{email}", current address "{current}", '
    'permanent address "{permanent}"'
)
def step_output_contains(context, name, email, current, permanent):
    actions = context.text_box_actions
    assert name in actions.get_submitted_name_output()
    assert email in actions.get_submitted_email_output()
    assert current in actions.get_submitted_current_address_output()
    assert permanent in actions.get_submitted_permanent_address_output()


@when("I click the submit button")
def step_click_submit(context):
    context.text_box_actions.click_submit()


@when("I reload the page")
def step_reload(context):
    context.text_box_actions.refresh_page()


@then("all fields and output should be empty")
def step_all_empty(context):
    actions = context.text_box_actions
    assert actions.is_full_name_empty(), "Full Name should be empty"
    assert actions.is_email_empty(), "Email should be empty"
    assert actions.is_current_address_empty(), "Current Address should be empty"
    assert actions.is_permanent_address_empty(), "Permanent Address should be empty"
    assert actions.is_output_empty(), "Output should be empty"
