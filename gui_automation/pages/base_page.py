"""Base Page Object shared by every demoqa.com page.

Implements the Page Object Model (POM) pattern for Playwright: each page class
inherits from BasePage, keeps its selectors as class constants and exposes
high-level queries and actions instead of raw selectors. All driver calls go
through :class:`BrowserUtil`.
"""

from __future__ import annotations

from playwright.sync_api import Page

from ..utils import config, driver_utils
from ..utils.browser_util import BrowserUtil
from ..utils.errors import DriverInitError
from ..utils.logging_utils import get_logger

logger = get_logger("pom")


class BasePage:
    """Browser-level navigation shared by all page objects."""

    # Subclasses override with the page-specific path segment.
    path: str = "/"

    def __init__(self, page: Page | None = None, base_url: str | None = None) -> None:
        page = page if page is not None else driver_utils.get_page()
        if page is None:
            raise DriverInitError("No browser session is open on this thread")
        self.page = page
        self.base_url = (base_url or config.get_base_url()).rstrip("/")
        self.util = BrowserUtil(page)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def url(self) -> str:
        """Canonical URL of this page."""
        return f"{self.base_url}{self.path}"

    def navigate(self) -> None:
        """Go to the page's canonical URL."""
        logger.info("Navigating to %s", self.url)
        self.page.goto(self.url)

    def navigate_to(self, url: str) -> None:
        self.page.goto(url)

    def get_current_url(self) -> str:
        return self.page.url

    def go_back(self) -> None:
        self.page.go_back()

    def refresh_page(self) -> None:
        self.page.reload()

    @property
    def title(self) -> str:
        return self.page.title()

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------

    def wait_for_load(self, state: str = "load") -> None:
        """Wait until the page reaches the given load state."""
        self.page.wait_for_load_state(state)

    def screenshot(self, path: str = "screenshot.png") -> bool:
        """Capture a full-page screenshot."""
        return self.util.screenshot(path)
