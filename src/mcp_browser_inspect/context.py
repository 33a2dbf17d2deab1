"""
Centralized server state.

Holds the configuration and the single BrowserSession shared by all tool
calls of this process.

Usage:
    from mcp_browser_inspect.context import get_context

    ctx = get_context()
    driver = await ctx.session.connect()
"""

from dataclasses import dataclass, field
from typing import Optional

from .browser.session import BrowserSession


@dataclass
class BrowserContext:
    """
    Encapsulates all browser state of the server process.

    Attributes:
        config: Environment configuration dictionary (see get_env_config)
        session: The shared browser session, created from config
    """

    config: dict = field(default_factory=dict)
    session: Optional[BrowserSession] = None

    def __post_init__(self):
        if self.session is None:
            self.session = BrowserSession(self.config)

    def is_connected(self) -> bool:
        """Check if the browser is connected."""
        return self.session is not None and self.session.is_connected()


# ============================================================================
# Global Context Management
# ============================================================================

_global_context: Optional[BrowserContext] = None


def get_context() -> BrowserContext:
    """
    Get or create the global browser context.

    All calls return the same instance. Use reset_context() to clear it
    (mainly for testing).
    """
    global _global_context

    if _global_context is None:
        from .config.environment import get_env_config

        _global_context = BrowserContext(config=get_env_config())

    return _global_context


def reset_context() -> None:
    """
    Reset the global context.

    Does not close the browser; call session.shutdown() first if one is running.
    """
    global _global_context
    _global_context = None


__all__ = [
    "BrowserContext",
    "get_context",
    "reset_context",
]
