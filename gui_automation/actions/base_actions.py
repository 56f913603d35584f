"""Shared browser-level actions for every Actions class."""

from __future__ import annotations

from ..pages.base_page import BasePage


class BaseActions(BasePage):
    """Workflow layer above the page objects.

    Inherits navigation (``get_current_url``, ``go_back``, ``refresh_page``,
    ``navigate_to``) from :class:`BasePage`, so every Actions subclass exposes
    them next to its page-specific steps.
    """
