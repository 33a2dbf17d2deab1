"""
Exception classes raised by the browser session and navigation layer.

Script execution errors are not wrapped here: whatever the WebDriver raises
while running a caller's script reaches the tool envelope unchanged.
"""


class BrowserInspectError(Exception):
    """Base exception for all errors raised by mcp_browser_inspect."""

    pass


class BrowserConnectionError(BrowserInspectError):
    """Raised when Chrome could not be launched or its page could not be created."""

    pass


class NotConnectedError(BrowserInspectError):
    """Raised when the page is requested before connect() finished."""

    def __init__(self, message: str = "Chrome not connected. Call connect() first."):
        super().__init__(message)


class NavigationError(BrowserInspectError):
    """Base exception for failures while loading a URL."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class InvalidProtocolError(NavigationError, ValueError):
    """Raised when the URL scheme is anything other than http or https."""

    def __init__(self, url: str, protocol: str):
        super().__init__(
            f"Invalid protocol: {protocol}. Only HTTP and HTTPS are supported.",
            url,
        )
        self.protocol = protocol


class InvalidURLError(NavigationError, ValueError):
    """Raised when the URL cannot be parsed as an absolute URL."""

    def __init__(self, url: str):
        super().__init__(f"Invalid URL format: {url}", url)


class NavigationTimeoutError(NavigationError):
    """Raised when the page did not finish loading within the timeout."""

    def __init__(self, url: str, timeout_ms: int):
        super().__init__(f"Navigation timeout after {timeout_ms}ms for {url}", url)
        self.timeout_ms = timeout_ms


class NetworkError(NavigationError):
    """Raised when Chrome reports a net:: level failure (DNS, refused, offline...)."""

    def __init__(self, url: str, detail: str):
        super().__init__(f"Network error navigating to {url}: {detail}", url)


class NavigationFailedError(NavigationError):
    """Raised for any other navigation failure."""

    def __init__(self, url: str, detail: str):
        super().__init__(f"Failed to navigate to {url}: {detail}", url)


__all__ = [
    "BrowserInspectError",
    "BrowserConnectionError",
    "NotConnectedError",
    "NavigationError",
    "InvalidProtocolError",
    "InvalidURLError",
    "NavigationTimeoutError",
    "NetworkError",
    "NavigationFailedError",
]
