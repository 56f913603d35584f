"""Page Object Model classes for demoqa.com."""

from .base_page import BasePage
from .check_box_page import CheckBoxPage
from .elements_page import ElementsPage
from .forms_page import FormsPage, PracticeFormPage
from .landing_page import LandingPage
from .text_box_page import TextBoxPage

__all__ = [
    "BasePage",
    "CheckBoxPage",
    "ElementsPage",
    "FormsPage",
    "LandingPage",
    "PracticeFormPage",
    "TextBoxPage",
]
