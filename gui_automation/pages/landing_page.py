"""Landing page (https://demoqa.com/) page object."""

from __future__ import annotations

from .base_page import BasePage

_CARD_CLASS = "card mt-4 top-card"


def _card(title: str) -> str:
    return (
        f"//div[contains(@class,'{_CARD_CLASS}')]//h5[text()='{title}']"
        f"/ancestor::div[contains(@class,'{_CARD_CLASS}')]"
    )


class LandingPage(BasePage):
    """Category cards, banner, logo and footer ad on the home page."""

    path = "/"

    # Card title -> path of the page the card opens.
    CARDS = {
        "Elements": "/elements",
        "Forms": "/forms",
        "Alerts, Frame & Windows": "/alertsWindows",
        "Widgets": "/widgets",
        "Interactions": "/interaction",
        "Book Store Application": "/books",
    }
    CARD_ALIASES = {"Alerts": "Alerts, Frame & Windows", "Book Store": "Book Store Application"}

    _ELEMENTS_CARD = _card("Elements")
    _FORMS_CARD = _card("Forms")
    _ALERTS_CARD = _card("Alerts, Frame & Windows")
    _WIDGETS_CARD = _card("Widgets")
    _INTERACTIONS_CARD = _card("Interactions")
    _BOOK_STORE_CARD = _card("Book Store Application")

    _BANNER = "//img[@class='banner-image' and @alt='Selenium Online Training']"
    _JOIN_NOW_LINK = "//a[@href='https://www.toolsqa.com/selenium-training/']//img[@class='banner-image']"
    _LOGO = "//header//a[@href='https://demoqa.com']//img[contains(@src,'Toolsq')]"
    _FOOTER_AD = "//div[contains(@class,'swiper-slide')]//img"

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------

    @classmethod
    def card_title(cls, name: str) -> str:
        """Resolve a short card name ("Alerts") to its full title."""
        title = cls.CARD_ALIASES.get(name, name)
        if title not in cls.CARDS:
            raise ValueError(f"Unknown card: {name}")
        return title

    def card_url(self, name: str) -> str:
        return f"{self.base_url}{self.CARDS[self.card_title(name)]}"

    def is_card_visible(self, name: str) -> bool:
        return self.util.wait_for_visible(_card(self.card_title(name))) is not None

    def click_card(self, name: str) -> None:
        """Click a card and wait for its page's URL."""
        title = self.card_title(name)
        self.util.click(_card(title))
        self.util.wait_for_url(f"**{self.CARDS[title]}")

    def is_elements_card_visible(self) -> bool:
        return self.util.wait_for_visible(self._ELEMENTS_CARD) is not None

    def is_forms_card_visible(self) -> bool:
        return self.util.wait_for_visible(self._FORMS_CARD) is not None

    def is_alerts_card_visible(self) -> bool:
        return self.util.wait_for_visible(self._ALERTS_CARD) is not None

    def is_widgets_card_visible(self) -> bool:
        return self.util.wait_for_visible(self._WIDGETS_CARD) is not None

    def is_interactions_card_visible(self) -> bool:
        return self.util.wait_for_visible(self._INTERACTIONS_CARD) is not None

    def is_book_store_card_visible(self) -> bool:
        return self.util.wait_for_visible(self._BOOK_STORE_CARD) is not None

    def click_elements_card(self) -> None:
        self.click_card("Elements")

    def click_forms_card(self) -> None:
        self.click_card("Forms")

    def click_alerts_card(self) -> None:
        self.click_card("Alerts")

    def click_widgets_card(self) -> None:
        self.click_card("Widgets")

    def click_interactions_card(self) -> None:
        self.click_card("Interactions")

    def click_book_store_card(self) -> None:
        self.click_card("Book Store")

    # ------------------------------------------------------------------
    # Banner, logo, ads
    # ------------------------------------------------------------------

    def is_banner_visible(self) -> bool:
        return self.util.wait_for_visible(self._BANNER) is not None

    def is_join_now_link_present(self) -> bool:
        return self.util.wait_for_visible(self._JOIN_NOW_LINK) is not None

    def click_join_now_link(self) -> None:
        self.util.click(self._JOIN_NOW_LINK)

    def is_logo_visible(self) -> bool:
        return self.util.wait_for_visible(self._LOGO) is not None

    def is_footer_ad_visible(self) -> bool:
        return self.util.wait_for_visible(self._FOOTER_AD) is not None

    def is_page_loaded(self) -> bool:
        return self.is_banner_visible()
