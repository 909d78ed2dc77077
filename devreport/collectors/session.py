"""Headless browser session used to observe the running application."""

from __future__ import annotations

import time
from typing import Callable, List, Optional

from playwright.sync_api import Browser, Page, Playwright, sync_playwright

from ..logging import get_logger

logger = get_logger("collectors.session")


def wait_for_quiet(
    count: Callable[[], int],
    sleep: Callable[[float], None],
    *,
    quiet_period: float,
    timeout: float,
    poll_interval: float = 0.1,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """Block until ``count()`` stops changing for ``quiet_period`` seconds.

    Gives up after ``timeout`` seconds in total and returns the last count seen.
    """
    start = clock()
    last_count = count()
    quiet_since = start
    while True:
        now = clock()
        if now - quiet_since >= quiet_period or now - start >= timeout:
            return last_count
        sleep(poll_interval)
        current = count()
        if current != last_count:
            last_count = current
            quiet_since = clock()


class BrowserSession:
    """Scoped Chromium page pointed at the application under development.

    Use as a context manager; the browser and the Playwright driver are
    released on every exit path.
    """

    def __init__(
        self,
        url: str,
        *,
        headless: bool = True,
        overlay_selector: str = ".react-error-overlay",
        ready_timeout: float = 5.0,
        quiet_period: float = 1.0,
        settle_timeout: float = 5.0,
        poll_interval: float = 0.1,
    ) -> None:
        self.url = url
        self.headless = headless
        self.overlay_selector = overlay_selector
        self.ready_timeout = ready_timeout
        self.quiet_period = quiet_period
        self.settle_timeout = settle_timeout
        self.poll_interval = poll_interval
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    def __enter__(self) -> "BrowserSession":
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(headless=self.headless)
            self._page = self._browser.new_page()
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def close(self) -> None:
        browser, driver = self._browser, self._playwright
        self._page = None
        self._browser = None
        self._playwright = None
        try:
            if browser is not None:
                browser.close()
        finally:
            if driver is not None:
                driver.stop()

    def capture_errors(self) -> List[str]:
        """Navigate to the app and return the stacks of uncaught exceptions."""
        page = self._require_page()
        stacks: List[str] = []

        def _on_page_error(error: object) -> None:
            stack = getattr(error, "stack", None) or str(error)
            stacks.append(stack)

        # Registered before navigation so errors thrown during page load are seen.
        page.on("pageerror", _on_page_error)
        try:
            page.goto(self.url)
            page.wait_for_selector("body", timeout=self.ready_timeout * 1000)
            wait_for_quiet(
                lambda: len(stacks),
                lambda seconds: page.wait_for_timeout(seconds * 1000),
                quiet_period=self.quiet_period,
                timeout=self.settle_timeout,
                poll_interval=self.poll_interval,
            )
        finally:
            page.remove_listener("pageerror", _on_page_error)
        logger.debug("Captured %d uncaught errors from %s", len(stacks), self.url)
        return list(stacks)

    def read_overlay(self) -> Optional[str]:
        """Return the text of the build-error overlay, or None when it is absent."""
        page = self._require_page()
        element = page.query_selector(self.overlay_selector)
        if element is None:
            return None
        return element.inner_text()

    def _require_page(self) -> Page:
        if self._page is None:
            raise RuntimeError("BrowserSession must be entered before use")
        return self._page


__all__ = ["BrowserSession", "wait_for_quiet"]
