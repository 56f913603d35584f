"""Live tests for the Forms section and Practice Form."""

from __future__ import annotations

import pytest

pytestmark = [pytest.mark.e2e]


class TestPracticeFormComponent:
    def test_open_practice_form(self, forms_page_actions, base_url):
        forms_page_actions.go_to_practice_form()
        assert forms_page_actions.get_current_url() == f"{base_url}automation-practice-form"

    @pytest.mark.slow
    def test_partial_submission_is_rejected(self, forms_page_actions):
        forms_page_actions.go_to_practice_form()
        forms_page_actions.fill_practice_form("Ada", "Lovelace", "ada@example.com")
        forms_page_actions.submit_practice_form()

        # Gender and mobile are required, so the confirmation modal stays closed.
        assert not forms_page_actions.is_confirmation_visible()
