"""Clicks that survive ads and overlays on demoqa.com.

demoqa.com serves a fixed banner (``#fixedban``), dismissable popups and full
page Google vignette ads. A vignette is announced by ``#google_vignette`` in the
URL and swallows every click until it goes away. The helpers here clear those
overlays between a bounded number of click attempts and let the last failure
propagate to the test.
"""

from __future__ import annotations

from .browser_util import BrowserUtil
from .errors import ClickInterceptedError, ElementNotInteractableError
from .logging_utils import get_logger

logger = get_logger("click-recovery")

AD_REDIRECT_MARKER = "#google_vignette"
MAX_CLICK_ATTEMPTS = 3
MARKER_TIMEOUT_SECONDS = 5
SETTLE_SECONDS = 1


def dismiss_overlays(
    util: BrowserUtil,
    marker: str = AD_REDIRECT_MARKER,
    marker_timeout: float = MARKER_TIMEOUT_SECONDS,
) -> None:
    """Hide the fixed banner, close known popups and wait out an ad redirect."""
    util.hide_fixed_banner()
    util.close_known_popups()
    if marker in util.get_url():
        logger.info("Ad redirect detected (%s), waiting for it to clear", marker)
        util.wait_for_url_does_not_contain(marker, marker_timeout)


def click_with_recovery(
    util: BrowserUtil,
    selector: str,
    *,
    max_attempts: int = MAX_CLICK_ATTEMPTS,
    scroll: bool = False,
    marker: str = AD_REDIRECT_MARKER,
) -> None:
    """Click *selector*, clearing overlays between at most *max_attempts* tries.

    With ``scroll=True`` the target is centred in the viewport before every
    attempt. The error from the final attempt is re-raised unchanged.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for attempt in range(1, max_attempts + 1):
        if scroll:
            util.scroll_to(selector, block="center")
        try:
            util.click(selector)
            return
        except ElementNotInteractableError as exc:
            if attempt == max_attempts:
                logger.error("Click failed after %d attempts: %s", attempt, selector)
                raise
            logger.warning("Click attempt %d/%d failed for %s: %s", attempt, max_attempts, selector, exc)
            dismiss_overlays(util, marker)
            util.wait_seconds(SETTLE_SECONDS)


def click_with_ad_handling(util: BrowserUtil, selector: str, marker: str = AD_REDIRECT_MARKER) -> None:
    """Click once; if an overlay intercepts, clear a pending ad redirect and click again."""
    try:
        util.click(selector)
    except ClickInterceptedError:
        if marker in util.get_url():
            util.close_known_popups()
            util.wait_for_url_does_not_contain(marker, MARKER_TIMEOUT_SECONDS)
        util.click(selector)
