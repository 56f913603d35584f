"""Playwright helpers shared by every page object.

All driver-specific calls live here so page objects only deal in selector
strings. Lookups that time out are logged and turned into ``None``/``False``/
``""`` results; callers are expected to check them. Click failures are the
exception: they raise :class:`ElementNotInteractableError` or
:class:`ClickInterceptedError` so the recovery helpers can react to them.
"""

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Iterable

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from . import config
from .errors import ClickInterceptedError, ElementNotInteractableError
from .logging_utils import get_logger

logger = get_logger("browser")

# Playwright's call log names the element that stole the click with this phrase.
INTERCEPTED_MESSAGE = "intercepts pointer events"

CLOSE_POPUP_SELECTORS = (
    "//button[normalize-space()='Close']",
    "//button[contains(@class,'close')]",
    "//div[contains(@class,'close') or contains(@class,'Close') "
    "or contains(@class,'modal-close') or contains(@class,'popup-close')]",
    ".close, .close-btn, .close-button, .modal-close, .popup-close",
    "//span[text()='×']",
    "//button[@aria-label='Close']",
)

FIXED_BANNER_ID = "fixedban"
_HIDE_BY_ID_JS = "id => { const el = document.getElementById(id); if (el) el.style.display = 'none'; }"
_SCROLL_INTO_VIEW_JS = "(el, block) => el.scrollIntoView({block: block})"

URL_POLL_INTERVAL_MS = 250

_EXPANDED_ICONS = {"rct-icon-parent-open", "rct-icon-expand-open"}
_COLLAPSED_ICONS = {"rct-icon-parent-close", "rct-icon-expand-close"}
_CHECKED_ICON = "rct-icon-check"
_HALF_CHECKED_ICON = "rct-icon-half-check"


def generate_random_name_with_timestamp(prefix: str = "screenshot") -> str:
    """Return e.g. ``screenshot_20240131_235959``."""
    return f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


class BrowserUtil:
    """Timeout-aware wrappers around one Playwright :class:`Page`."""

    def __init__(
        self,
        page: Page,
        *,
        timeout_ms: int | None = None,
        click_timeout_ms: int | None = None,
        popup_timeout_ms: int | None = None,
    ) -> None:
        self.page = page
        self.timeout_ms = timeout_ms if timeout_ms is not None else config.get_default_wait_ms()
        self.click_timeout_ms = (
            click_timeout_ms if click_timeout_ms is not None else config.get_int("click.timeout.ms", 5_000)
        )
        self.popup_timeout_ms = (
            popup_timeout_ms if popup_timeout_ms is not None else config.get_int("popup.wait.ms", 1_000)
        )

    # ------------------------------------------------------------------
    # Lookup and waits
    # ------------------------------------------------------------------

    def find(self, selector: str) -> Locator | None:
        """Return the first element matching *selector* without waiting."""
        locator = self.page.locator(selector)
        if locator.count() == 0:
            logger.warning("Element not found: %s", selector)
            return None
        return locator.first

    def wait_for_visible(
        self, selector: str, timeout: float | None = None, *, log_missing: bool = True
    ) -> Locator | None:
        timeout = self.timeout_ms if timeout is None else timeout
        element = self.page.locator(selector).first
        try:
            element.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError:
            if log_missing:
                logger.warning("Element not visible after %d ms: %s", timeout, selector)
            return None
        return element

    def wait_for_clickable(self, selector: str) -> Locator | None:
        element = self.wait_for_visible(selector)
        if element is None:
            return None
        if not element.is_enabled():
            logger.warning("Element visible but disabled: %s", selector)
            return None
        return element

    def first_visible(self, selectors: Iterable[str], timeout: float | None = None) -> tuple[str, Locator] | None:
        """Return ``(selector, element)`` for the first selector that becomes visible."""
        for selector in selectors:
            element = self.wait_for_visible(selector, timeout, log_missing=False)
            if element is not None:
                return selector, element
            logger.debug("Selector '%s' not visible, trying next", selector)
        return None

    def wait_for_disappear(self, selector: str) -> bool:
        try:
            self.page.locator(selector).first.wait_for(state="hidden", timeout=self.timeout_ms)
        except PlaywrightTimeoutError:
            logger.warning("Element still visible after %d ms: %s", self.timeout_ms, selector)
            return False
        return True

    def wait_for_page_load(self) -> bool:
        try:
            self.page.wait_for_load_state("load", timeout=self.timeout_ms)
        except PlaywrightTimeoutError:
            logger.warning("Page did not finish loading after %d ms", self.timeout_ms)
            return False
        return True

    def wait_for_url(self, pattern: str, timeout: float | None = None) -> bool:
        """Wait until the URL matches *pattern* (glob, e.g. ``**/elements``)."""
        timeout = self.timeout_ms if timeout is None else timeout
        try:
            self.page.wait_for_url(pattern, timeout=timeout)
        except PlaywrightTimeoutError:
            logger.warning("URL did not match %s after %d ms (now %s)", pattern, timeout, self.page.url)
            return False
        return True

    def wait_for_url_does_not_contain(self, fragment: str, timeout_seconds: float) -> bool:
        """Poll the URL until *fragment* is gone; ``False`` once *timeout_seconds* elapse."""
        deadline = time.monotonic() + timeout_seconds
        while fragment in self.page.url:
            if time.monotonic() >= deadline:
                logger.warning("URL still contains '%s' after %ss: %s", fragment, timeout_seconds, self.page.url)
                return False
            self.page.wait_for_timeout(URL_POLL_INTERVAL_MS)
        return True

    def wait_seconds(self, seconds: float) -> None:
        """Fixed pause; prefer a condition wait where one exists."""
        self.page.wait_for_timeout(seconds * 1000)

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------

    def click(self, selector: str) -> None:
        """Click once the element is clickable.

        A missing element is only logged. A click that Playwright cannot
        deliver raises :class:`ClickInterceptedError` when another element sits
        on top of the target, :class:`ElementNotInteractableError` otherwise.
        """
        element = self.wait_for_clickable(selector)
        if element is None:
            logger.error("Unable to click element: %s", selector)
            return
        try:
            element.click(timeout=self.click_timeout_ms)
        except PlaywrightError as exc:
            if INTERCEPTED_MESSAGE in str(exc):
                raise ClickInterceptedError(selector) from exc
            raise ElementNotInteractableError(selector) from exc

    def type(self, selector: str, text: str) -> None:
        element = self.wait_for_visible(selector)
        if element is None:
            logger.error("Unable to type in element: %s", selector)
            return
        element.fill(text)

    def select_by_text(self, selector: str, text: str) -> None:
        element = self.wait_for_visible(selector)
        if element is not None:
            element.select_option(label=text)

    def select_by_value(self, selector: str, value: str) -> None:
        element = self.wait_for_visible(selector)
        if element is not None:
            element.select_option(value=value)

    def hover(self, selector: str) -> None:
        element = self.wait_for_visible(selector)
        if element is not None:
            element.hover()

    def scroll_to(self, selector: str, block: str = "start") -> bool:
        element = self.find(selector)
        if element is None:
            return False
        element.evaluate(_SCROLL_INTO_VIEW_JS, block)
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_text(self, selector: str) -> str:
        element = self.find(selector)
        return element.inner_text() if element is not None else ""

    def get_attribute(self, selector: str, attribute: str) -> str:
        """Attribute value, ``""`` when the element or attribute is absent.

        ``value`` reads the live form value rather than the markup attribute.
        """
        element = self.find(selector)
        if element is None:
            return ""
        if attribute == "value":
            return element.input_value()
        return element.get_attribute(attribute) or ""

    def get_all_texts(self, selector: str) -> list[str]:
        return [text.strip() for text in self.page.locator(selector).all_inner_texts()]

    def get_title(self) -> str:
        return self.page.title()

    def get_url(self) -> str:
        return self.page.url

    # ------------------------------------------------------------------
    # Browser-level helpers
    # ------------------------------------------------------------------

    def go_to(self, url: str) -> None:
        self.page.goto(url)

    def maximize(self) -> None:
        """Grow the viewport to the configured window size."""
        self.page.set_viewport_size(
            {"width": config.get_int("viewport.width", 1920), "height": config.get_int("viewport.height", 1080)}
        )

    def clear_cookies(self) -> None:
        self.page.context.clear_cookies()

    def add_cookie(self, name: str, value: str) -> None:
        self.page.context.add_cookies([{"name": name, "value": value, "url": self.page.url}])

    def accept_alert(self) -> None:
        """Accept the next JavaScript dialog the page opens."""
        self.page.once("dialog", lambda dialog: dialog.accept())

    def dismiss_alert(self) -> None:
        """Dismiss the next JavaScript dialog the page opens."""
        self.page.once("dialog", lambda dialog: dialog.dismiss())

    def screenshot(self, path: str | Path) -> bool:
        """Save a full-page PNG to *path*, creating parent directories."""
        destination = Path(path)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            self.page.screenshot(path=str(destination), full_page=True)
        except (OSError, PlaywrightError) as exc:
            logger.error("An error occurred while saving the screenshot: %s", exc)
            return False
        return True

    # ------------------------------------------------------------------
    # Overlays
    # ------------------------------------------------------------------

    def hide_fixed_banner(self) -> None:
        try:
            self.page.evaluate(_HIDE_BY_ID_JS, FIXED_BANNER_ID)
        except PlaywrightError as exc:
            logger.debug("Could not hide fixed banner: %s", exc)

    def close_known_popups(self) -> bool:
        """Click the first visible close button from :data:`CLOSE_POPUP_SELECTORS`.

        Each selector is probed once with the short popup timeout, so the call
        returns after at most ``len(CLOSE_POPUP_SELECTORS)`` probes.
        """
        for selector in CLOSE_POPUP_SELECTORS:
            element = self.wait_for_visible(selector, self.popup_timeout_ms, log_missing=False)
            if element is None:
                continue
            try:
                element.click(timeout=self.popup_timeout_ms)
            except PlaywrightError as exc:
                logger.debug("Close button %s not clickable: %s", selector, exc)
                continue
            logger.info("Closed pop-up/ad using locator: %s", selector)
            return True
        return False

    # ------------------------------------------------------------------
    # Checkbox tree (react-checkbox-tree icons)
    # ------------------------------------------------------------------

    def _icon_classes(self, selector: str) -> set[str]:
        element = self.find(selector)
        if element is None:
            return set()
        return set((element.locator("svg").first.get_attribute("class") or "").split())

    def is_folder_expanded(self, selector: str) -> bool:
        return bool(self._icon_classes(selector) & _EXPANDED_ICONS)

    def is_folder_collapsed(self, selector: str) -> bool:
        return bool(self._icon_classes(selector) & _COLLAPSED_ICONS)

    def is_checkbox_checked(self, selector: str) -> bool:
        return _CHECKED_ICON in self._icon_classes(selector)

    def is_checkbox_partially_checked(self, selector: str) -> bool:
        return _HALF_CHECKED_ICON in self._icon_classes(selector)
