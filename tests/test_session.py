"""Tests for the shared browser session. No real browser is launched."""

import asyncio
import threading
import time
from unittest.mock import Mock, patch

import pytest
from selenium.common.exceptions import SessionNotCreatedException, WebDriverException

from mcp_browser_inspect.browser import BrowserSession
from mcp_browser_inspect.errors import (
    BrowserConnectionError,
    InvalidProtocolError,
    NotConnectedError,
)


@pytest.fixture
def launcher():
    """Patch Chrome creation; yields the create_webdriver mock."""
    with patch("mcp_browser_inspect.browser.session.build_service") as service, \
         patch("mcp_browser_inspect.browser.session.create_webdriver") as create, \
         patch("mcp_browser_inspect.browser.session.kill_service_processes") as kill:
        create.return_value = Mock(name="driver")
        create.service = service
        create.kill = kill
        yield create


class TestConnect:

    def test_connect_launches_and_opens_blank_page(self, event_loop, launcher):
        session = BrowserSession({"headless": True, "navigation_timeout_ms": 12000})
        driver = event_loop.run_until_complete(session.connect())

        assert driver is launcher.return_value
        assert session.is_connected()
        driver.set_page_load_timeout.assert_called_once_with(12.0)
        driver.get.assert_called_once_with("about:blank")
        launcher.assert_called_once_with(session.config, launcher.service.return_value)

    def test_second_connect_reuses_driver(self, event_loop, launcher):
        session = BrowserSession()
        first = event_loop.run_until_complete(session.connect())
        second = event_loop.run_until_complete(session.connect())

        assert first is second
        assert launcher.call_count == 1

    def test_concurrent_connects_launch_once(self, event_loop, launcher):
        started = threading.Event()

        def slow_create(config, service):
            started.set()
            time.sleep(0.05)
            return Mock(name="driver")

        launcher.side_effect = slow_create
        session = BrowserSession()

        async def connect_many():
            return await asyncio.gather(*(session.connect() for _ in range(5)))

        drivers = event_loop.run_until_complete(connect_many())

        assert started.is_set()
        assert launcher.call_count == 1
        assert all(d is drivers[0] for d in drivers)

    def test_launch_failure_cleans_up_and_raises(self, event_loop, launcher):
        launcher.side_effect = SessionNotCreatedException("Chrome failed to start")
        launcher.kill.return_value = [4242]
        session = BrowserSession()

        with pytest.raises(BrowserConnectionError, match="Failed to launch Chrome"):
            event_loop.run_until_complete(session.connect())

        launcher.kill.assert_called_once_with(launcher.service.return_value)
        assert not session.is_connected()

    def test_failed_launch_is_retried(self, event_loop, launcher):
        good = Mock(name="driver")
        launcher.side_effect = [WebDriverException("boom"), good]
        session = BrowserSession()

        with pytest.raises(BrowserConnectionError):
            event_loop.run_until_complete(session.connect())
        assert event_loop.run_until_complete(session.connect()) is good

    def test_page_setup_failure_quits_driver(self, event_loop, launcher):
        driver = launcher.return_value
        driver.get.side_effect = WebDriverException("renderer gone")
        session = BrowserSession()

        with pytest.raises(BrowserConnectionError, match="Failed to create page"):
            event_loop.run_until_complete(session.connect())
        driver.quit.assert_called_once()
        assert not session.is_connected()


class TestGetPage:

    def test_before_connect(self):
        with pytest.raises(NotConnectedError, match="Call connect\\(\\) first"):
            BrowserSession().get_page()

    def test_after_connect(self, event_loop, launcher):
        session = BrowserSession()
        driver = event_loop.run_until_complete(session.connect())
        assert session.get_page() is driver


class TestGoto:

    def test_requires_connection(self, event_loop):
        with pytest.raises(NotConnectedError):
            event_loop.run_until_complete(BrowserSession().goto("https://example.com"))

    def test_uses_session_timeout(self, event_loop, launcher):
        session = BrowserSession({"navigation_timeout_ms": 7000})
        driver = event_loop.run_until_complete(session.connect())

        with patch("mcp_browser_inspect.browser.session.navigate") as navigate:
            event_loop.run_until_complete(session.goto("https://example.com"))
        navigate.assert_called_once_with(driver, "https://example.com", 7000)

    def test_explicit_timeout(self, event_loop, launcher):
        session = BrowserSession()
        driver = event_loop.run_until_complete(session.connect())

        with patch("mcp_browser_inspect.browser.session.navigate") as navigate:
            event_loop.run_until_complete(session.goto("https://example.com", timeout_ms=250))
        navigate.assert_called_once_with(driver, "https://example.com", 250)

    def test_rejects_bad_url_before_navigating(self, event_loop, launcher):
        session = BrowserSession()
        event_loop.run_until_complete(session.connect())

        with patch("mcp_browser_inspect.browser.session.navigate") as navigate:
            with pytest.raises(InvalidProtocolError):
                event_loop.run_until_complete(session.goto("ftp://example.com"))
        navigate.assert_not_called()


class TestClose:

    def test_close_quits_once(self, event_loop, launcher):
        session = BrowserSession()
        driver = event_loop.run_until_complete(session.connect())

        event_loop.run_until_complete(session.close())
        event_loop.run_until_complete(session.close())

        driver.quit.assert_called_once()
        assert not session.is_connected()

    def test_close_without_connect(self, event_loop):
        event_loop.run_until_complete(BrowserSession().close())

    def test_shutdown_swallows_quit_errors(self, event_loop, launcher):
        session = BrowserSession()
        driver = event_loop.run_until_complete(session.connect())
        driver.quit.side_effect = WebDriverException("already gone")

        session.shutdown()
        assert not session.is_connected()

    def test_connect_after_close_launches_again(self, event_loop, launcher):
        session = BrowserSession()
        event_loop.run_until_complete(session.connect())
        event_loop.run_until_complete(session.close())
        event_loop.run_until_complete(session.connect())
        assert launcher.call_count == 2


class TestDefaults:

    def test_defaults(self):
        session = BrowserSession()
        assert session.headless is False
        assert session.navigation_timeout_ms == 30000
        assert session.driver is None
