"""Browser session bootstrap: one Playwright session per thread.

``get_driver`` launches Chromium ("chrome") or Firefox, opens a page on the
requested URL and parks the session in a thread-local slot so parallel runners
never share a browser. ``quit_driver`` tears the current thread's session down
and an interpreter shutdown hook closes whatever is still open on any thread.
"""

from __future__ import annotations

import atexit
import threading
from dataclasses import dataclass
from pathlib import Path

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError

from . import config
from .errors import DriverInitError
from .logging_utils import get_logger

logger = get_logger("driver")

CHROME_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-extensions",
    "--disable-plugins",
    "--disable-web-security",
    "--disable-features=VizDisplayCompositor",
]

SUPPORTED_BROWSERS = ("chrome", "firefox")

_local = threading.local()

# Every open session across threads, for the shutdown hook.
_sessions: set[BrowserSession] = set()
_sessions_lock = threading.Lock()


@dataclass(eq=False)
class BrowserSession:
    """Live Playwright handles owned by a single thread."""

    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page


def get_session() -> BrowserSession | None:
    return getattr(_local, "session", None)


def get_page() -> Page | None:
    """Return the current thread's page, or ``None`` when no session is open."""
    session = get_session()
    return session.page if session else None


def get_driver(browser: str, url: str) -> Page:
    """Start a *browser* session for this thread, navigate to *url* and return its page."""
    name = browser.lower()
    if name not in SUPPORTED_BROWSERS:
        raise ValueError(f"Unsupported browser: {browser}")

    if get_session() is not None:
        logger.warning("Replacing an open browser session on this thread")
        quit_driver()

    headless = config.get_bool("headless", True)
    logger.info("Running in %s mode", "headless" if headless else "headed (UI)")

    if name == "chrome":
        launch_kwargs: dict = {"headless": headless, "args": list(CHROME_ARGS)}
        if config.get_bool("use.bundled.driver"):
            driver_path = Path(config.get("driver.path", ""))
            if not driver_path.is_file():
                raise DriverInitError(f"Bundled browser not found at: {driver_path}")
            launch_kwargs["executable_path"] = str(driver_path)
        session = _launch("Chrome", "chromium", launch_kwargs, url)
    else:
        session = _launch("Firefox", "firefox", {"headless": headless}, url)

    _local.session = session
    with _sessions_lock:
        _sessions.add(session)
    return session.page


def _launch(label: str, engine: str, launch_kwargs: dict, url: str) -> BrowserSession:
    playwright = sync_playwright().start()
    browser = None
    try:
        browser = getattr(playwright, engine).launch(**launch_kwargs)
        context = browser.new_context(
            viewport={
                "width": config.get_int("viewport.width", 1920),
                "height": config.get_int("viewport.height", 1080),
            }
        )
        context.set_default_timeout(config.get_default_wait_ms())
        page = context.new_page()
        page.goto(url)
    except PlaywrightError as exc:
        logger.error("Failed to create %s session: %s", label, exc)
        if browser is not None:
            browser.close()
        playwright.stop()
        raise DriverInitError(f"Failed to create {label} session") from exc

    logger.info("Successfully created %s session and navigated to: %s", label, url)
    return BrowserSession(playwright=playwright, browser=browser, context=context, page=page)


def _close_session(session: BrowserSession) -> None:
    try:
        session.context.close()
        session.browser.close()
    except PlaywrightError as exc:
        logger.warning("Error during browser cleanup: %s", exc)
    finally:
        with _sessions_lock:
            _sessions.discard(session)
        session.playwright.stop()


def quit_driver() -> None:
    """Close the current thread's session and clear the slot."""
    session = get_session()
    if session is None:
        return
    try:
        _close_session(session)
    finally:
        _local.session = None
    logger.info("Browser session closed and cleaned up")


def _shutdown_hook() -> None:
    """Close sessions left open on any thread, not just the main one."""
    with _sessions_lock:
        leftover = list(_sessions)
    if not leftover:
        return
    logger.info("Interpreter shutting down, cleaning up %d browser session(s)...", len(leftover))
    for session in leftover:
        try:
            _close_session(session)
        except Exception as exc:  # the owning thread may already be gone
            logger.warning("Could not close browser session at shutdown: %s", exc)
    _local.session = None


atexit.register(_shutdown_hook)
