import asyncio

import pytest

from mcp_browser_inspect.context import reset_context

##
## We DO NOT want to use pytest-asyncio.
## Instead, use event_loop.run_until_complete()!
##


@pytest.fixture(scope="function")
def event_loop():
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


@pytest.fixture(autouse=True)
def _fresh_context(monkeypatch):
    """Every test starts without a browser context and with default settings."""
    for name in (
        "CHROME_HEADLESS",
        "CHROME_EXECUTABLE_PATH",
        "MCP_NAVIGATION_TIMEOUT_MS",
        "MCP_BROWSER_LOG_FILE",
        "MCP_BROWSER_LOG_LEVEL",
        "MBI_TOOL_ERRORS_TRACEBACK",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_context()
    yield
    reset_context()
