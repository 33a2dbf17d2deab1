"""URL validation and page loading."""

import time
from urllib.parse import urlsplit

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.support.ui import WebDriverWait

from ..constants import ALLOWED_SCHEMES, DEFAULT_NAVIGATION_TIMEOUT_MS
from ..errors import (
    InvalidProtocolError,
    InvalidURLError,
    NavigationFailedError,
    NavigationTimeoutError,
    NetworkError,
)

import logging
logger = logging.getLogger(__name__)


# Characters a URL host can never contain
_FORBIDDEN_HOST_CHARS = frozenset(" <>\"{}|\\^`")


def validate_url(url: str) -> str:
    """
    Check that ``url`` is an absolute http(s) URL and return it unchanged.

    Raises:
        InvalidURLError: The URL has no scheme, no host or a malformed host,
            or cannot be parsed.
        InvalidProtocolError: The scheme is something other than http/https.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(url) from e

    if not parts.scheme:
        raise InvalidURLError(url)

    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        raise InvalidProtocolError(url, f"{scheme}:")

    try:
        hostname = parts.hostname
        parts.port  # raises on a non-numeric port
    except ValueError as e:
        raise InvalidURLError(url) from e
    if not hostname:
        raise InvalidURLError(url)
    if any(c.isspace() or c in _FORBIDDEN_HOST_CHARS for c in hostname):
        raise InvalidURLError(url)

    return url


def _error_detail(exc: WebDriverException) -> str:
    return (getattr(exc, "msg", None) or str(exc)).strip()


def _wait_document_complete(driver, timeout: float) -> None:
    """Wait for document.readyState == 'complete'."""
    try:
        WebDriverWait(driver, timeout).until(
            lambda d: d.execute_script("return document.readyState") == "complete"
        )
    except TimeoutException:
        # Not fatal: get() already returned, late subresources are tolerated
        logger.debug("document.readyState did not reach 'complete' within %.1fs", timeout)


def navigate(driver, url: str, timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS) -> None:
    """
    Load ``url`` in the current tab, blocking until the page has loaded.

    Raises:
        InvalidURLError, InvalidProtocolError: Before anything is loaded.
        NavigationTimeoutError: The page did not load within ``timeout_ms``.
        NetworkError: Chrome reported a net:: error (DNS, connection refused...).
        NavigationFailedError: Any other WebDriver failure.
    """
    validate_url(url)

    timeout_sec = timeout_ms / 1000
    deadline = time.monotonic() + timeout_sec
    logger.info(f"Navigating to {url}")

    try:
        driver.set_page_load_timeout(timeout_sec)
        driver.get(url)
    except TimeoutException as e:
        raise NavigationTimeoutError(url, timeout_ms) from e
    except WebDriverException as e:
        detail = _error_detail(e)
        if "net::" in detail:
            raise NetworkError(url, detail) from e
        raise NavigationFailedError(url, detail) from e

    # get() and the readyState wait share one timeout budget
    _wait_document_complete(driver, max(deadline - time.monotonic(), 0.0))


__all__ = ["validate_url", "navigate"]
