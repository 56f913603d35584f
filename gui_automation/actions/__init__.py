"""Actions layer: one workflow class per page object."""

from .base_actions import BaseActions
from .check_box_actions import CheckBoxActions
from .elements_page_actions import ElementsPageActions
from .forms_page_actions import FormsPageActions
from .landing_page_actions import LandingPageActions
from .text_box_actions import TextBoxActions

__all__ = [
    "BaseActions",
    "CheckBoxActions",
    "ElementsPageActions",
    "FormsPageActions",
    "LandingPageActions",
    "TextBoxActions",
]
