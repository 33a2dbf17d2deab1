"""WebDriver creation and teardown."""

import os
import tempfile
from typing import Optional

import psutil
from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service as ChromeService

import logging
logger = logging.getLogger(__name__)


def chromedriver_log_path() -> str:
    """Get path to the chromedriver log file for this process."""
    return os.path.join(tempfile.gettempdir(), f"chromedriver_mcp_browser_inspect_{os.getpid()}.log")


def build_chrome_options(config: dict) -> Options:
    """Chrome options for an isolated, throwaway automation session."""
    options = Options()

    chrome_path = config.get("chrome_path")
    if chrome_path:
        options.binary_location = chrome_path

    options.add_argument("--no-first-run")
    options.add_argument("--no-default-browser-check")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_argument("--disable-extensions")
    options.add_argument("--disable-popup-blocking")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])

    if config.get("headless"):
        options.add_argument("--headless=new")

    return options


def build_service() -> ChromeService:
    log_file = chromedriver_log_path()
    try:
        return ChromeService(log_output=log_file)  # newer Selenium
    except TypeError:
        return ChromeService(log_path=log_file)    # older Selenium


def create_webdriver(config: dict, service: Optional[ChromeService] = None) -> webdriver.Chrome:
    """Launch Chrome and return a driver attached to its first tab."""
    options = build_chrome_options(config)
    if service is None:
        service = build_service()
    return webdriver.Chrome(service=service, options=options)


def kill_service_processes(service: Optional[ChromeService]) -> list[int]:
    """
    Stop a chromedriver service and kill any browser processes it left behind.

    Used after a failed launch, when there is no driver to quit().

    Returns:
        list[int]: PIDs that were killed.
    """
    killed = []
    proc = getattr(service, "process", None) if service is not None else None

    if proc is not None:
        try:
            for child in psutil.Process(proc.pid).children(recursive=True):
                try:
                    child.kill()
                    killed.append(child.pid)
                except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
                    logger.debug(f"Could not kill leftover process: {e}")
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.debug(f"chromedriver process already gone: {e}")

    if service is not None:
        try:
            service.stop()
        except Exception as e:
            logger.debug(f"chromedriver service stop failed (non-critical): {e}")

    return killed


__all__ = [
    "chromedriver_log_path",
    "build_chrome_options",
    "build_service",
    "create_webdriver",
    "kill_service_processes",
]
