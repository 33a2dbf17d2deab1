"""Chrome lifecycle: driver creation and the shared browser session."""

from .driver import create_webdriver, build_chrome_options, kill_service_processes
from .session import BrowserSession

__all__ = [
    "create_webdriver",
    "build_chrome_options",
    "kill_service_processes",
    "BrowserSession",
]
