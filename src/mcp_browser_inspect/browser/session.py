"""
The shared browser session.

One Chrome instance and one tab per server process. Every tool call goes
through connect(), which launches Chrome the first time and hands the same
driver to everyone afterwards. Concurrent first calls wait on a single launch.

Selenium is blocking, so each WebDriver call is pushed to a worker thread
with asyncio.to_thread.
"""

import asyncio
from typing import Optional

from selenium import webdriver

from ..actions.navigation import navigate, validate_url
from ..constants import DEFAULT_NAVIGATION_TIMEOUT_MS
from ..errors import BrowserConnectionError, NotConnectedError
from ..utils.diagnostics import collect_diagnostics
from .driver import build_service, create_webdriver, kill_service_processes

import logging
logger = logging.getLogger(__name__)


class BrowserSession:
    """Lazily launched Chrome plus the tab all tools operate on."""

    def __init__(self, config: Optional[dict] = None):
        self.config = dict(config or {})
        self.headless = bool(self.config.get("headless", False))
        self.navigation_timeout_ms = int(
            self.config.get("navigation_timeout_ms") or DEFAULT_NAVIGATION_TIMEOUT_MS
        )
        self.driver: Optional[webdriver.Chrome] = None
        self._connect_lock: Optional[asyncio.Lock] = None

    def _get_connect_lock(self) -> asyncio.Lock:
        """Get or create the connect lock (created inside the running loop)."""
        if self._connect_lock is None:
            self._connect_lock = asyncio.Lock()
        return self._connect_lock

    def _launch(self) -> webdriver.Chrome:
        """Start Chrome. Blocking; cleans up after itself on failure."""
        logger.info(f"Launching Chrome (headless={self.headless})...")
        service = build_service()

        try:
            driver = create_webdriver(self.config, service)
        except Exception as e:
            killed = kill_service_processes(service)
            if killed:
                logger.info(f"Killed {len(killed)} leftover browser processes")
            logger.error(f"Chrome launch failed\n{collect_diagnostics(None, e, self.config)}")
            raise BrowserConnectionError(f"Failed to launch Chrome: {e}") from e

        try:
            driver.set_page_load_timeout(self.navigation_timeout_ms / 1000)
            driver.get("about:blank")
        except Exception as e:
            logger.error(f"Chrome page setup failed\n{collect_diagnostics(driver, e, self.config)}")
            try:
                driver.quit()
            except Exception as quit_error:
                logger.debug(f"driver.quit() after failed setup: {quit_error}")
            raise BrowserConnectionError(f"Failed to create page: {e}") from e

        logger.info("Chrome ready")
        return driver

    async def connect(self) -> webdriver.Chrome:
        """
        Launch Chrome if needed and return the driver.

        Safe to call concurrently: at most one launch is in flight and every
        caller receives the same driver. A failed launch is not cached, so the
        next call tries again.

        Raises:
            BrowserConnectionError: Chrome could not be started.
        """
        if self.driver is not None:
            return self.driver

        async with self._get_connect_lock():
            if self.driver is None:
                self.driver = await asyncio.to_thread(self._launch)
            return self.driver

    def get_page(self) -> webdriver.Chrome:
        """
        Return the connected driver.

        Raises:
            NotConnectedError: connect() has not completed yet.
        """
        if self.driver is None:
            raise NotConnectedError()
        return self.driver

    async def goto(self, url: str, timeout_ms: Optional[int] = None) -> None:
        """
        Navigate the session tab to ``url`` and wait for the page to load.

        The URL is validated before anything is sent to the browser.

        Raises:
            NotConnectedError, InvalidURLError, InvalidProtocolError,
            NavigationTimeoutError, NetworkError, NavigationFailedError
        """
        driver = self.get_page()
        validate_url(url)
        if timeout_ms is None:
            timeout_ms = self.navigation_timeout_ms
        await asyncio.to_thread(navigate, driver, url, timeout_ms)

    def _quit(self) -> bool:
        driver, self.driver = self.driver, None
        if driver is None:
            return False
        try:
            driver.quit()
        finally:
            logger.info("Chrome closed")
        return True

    async def close(self) -> None:
        """Quit Chrome. Does nothing when not connected."""
        if self.driver is None:
            return
        await asyncio.to_thread(self._quit)

    def shutdown(self) -> None:
        """Best-effort synchronous quit for signal handlers and interpreter exit."""
        try:
            self._quit()
        except Exception as e:
            logger.warning(f"Error while closing Chrome: {e}")

    def is_connected(self) -> bool:
        return self.driver is not None


__all__ = ["BrowserSession"]
