"""Environment report logged when Chrome fails to start or to open its page."""

import platform
from typing import Optional

import selenium
from selenium import webdriver

_LABEL_WIDTH = 16


def _driver_versions(driver: webdriver.Chrome) -> list[tuple[str, str]]:
    capabilities = getattr(driver, "capabilities", None) or {}
    chromedriver = (capabilities.get("chrome") or {}).get("chromedriverVersion") or "<unknown>"
    return [
        ("Chrome", capabilities.get("browserVersion") or "<unknown>"),
        # "114.0.5735.90 (386bc09e8f4f...)" -> version only
        ("chromedriver", chromedriver.split(" ")[0]),
    ]


def collect_diagnostics(
    driver: Optional[webdriver.Chrome] = None,
    exc: Optional[BaseException] = None,
    config: Optional[dict] = None,
) -> str:
    """
    Describe the platform, the browser setup and the failure.

    Args:
        driver: The WebDriver, or None when the launch itself failed.
        exc: The exception being reported, if any.
        config: Configuration dict from get_env_config().

    Returns:
        str: One "label: value" line per fact.
    """
    config = config or {}

    rows = [
        ("Platform", f"{platform.system()} {platform.release()} ({platform.machine()})"),
        ("Python", platform.python_version()),
        ("Selenium", getattr(selenium, "__version__", "?")),
        ("Chrome binary", config.get("chrome_path") or "<selenium manager>"),
        ("Headless", str(bool(config.get("headless")))),
        ("Driver started", str(driver is not None)),
    ]
    if driver is not None:
        rows += _driver_versions(driver)
    if exc is not None:
        rows += [
            ("Exception", type(exc).__name__),
            ("Message", str(exc).strip() or "<empty>"),
        ]

    return "\n".join(f"{label.ljust(_LABEL_WIDTH)}: {value}" for label, value in rows)


__all__ = ["collect_diagnostics"]
