"""Environment configuration and validation."""

import os
import tempfile
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

from ..constants import DEFAULT_NAVIGATION_TIMEOUT_MS

import logging
logger = logging.getLogger(__name__)


load_dotenv(find_dotenv(filename=".env", usecwd=True))


def is_headless() -> bool:
    """
    Whether Chrome should be launched without a visible window.

    Only the exact value "true" enables headless mode; anything else, including
    "1" or "True", keeps the window visible.
    """
    return os.getenv("CHROME_HEADLESS") == "true"


def get_env_config() -> dict:
    """
    Read environment variables into a configuration dict.

    Optional:   CHROME_HEADLESS ("true" for headless, anything else for a visible window)
                CHROME_EXECUTABLE_PATH (defaults to Selenium Manager's lookup)
                MCP_NAVIGATION_TIMEOUT_MS (default 30000)
    """
    chrome_path = (os.getenv("CHROME_EXECUTABLE_PATH") or "").strip() or None

    timeout_env = (os.getenv("MCP_NAVIGATION_TIMEOUT_MS") or "").strip()
    if timeout_env and not timeout_env.isdigit():
        raise EnvironmentError(
            f"MCP_NAVIGATION_TIMEOUT_MS must be a positive integer, got {timeout_env!r}."
        )
    navigation_timeout_ms = int(timeout_env) if timeout_env else DEFAULT_NAVIGATION_TIMEOUT_MS

    return {
        "headless": is_headless(),
        "chrome_path": chrome_path,
        "navigation_timeout_ms": navigation_timeout_ms,
    }


def get_log_file() -> str:
    """Log file path, MCP_BROWSER_LOG_FILE or <tmp>/mcp_browser_inspect.log."""
    configured = (os.getenv("MCP_BROWSER_LOG_FILE") or "").strip()
    if configured:
        return configured
    return str(Path(tempfile.gettempdir()) / "mcp_browser_inspect.log")


def get_log_level() -> int:
    name = (os.getenv("MCP_BROWSER_LOG_LEVEL") or "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(f"Unknown MCP_BROWSER_LOG_LEVEL {name!r}; using INFO")
        return logging.INFO
    return level


def include_error_tracebacks() -> bool:
    """Set MBI_TOOL_ERRORS_TRACEBACK=0 to keep tracebacks out of the tool error log."""
    return os.getenv("MBI_TOOL_ERRORS_TRACEBACK", "1") not in ("0", "false", "False")
