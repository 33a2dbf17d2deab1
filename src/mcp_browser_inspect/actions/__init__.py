"""Page-level operations delegated to the WebDriver (blocking, run them off the event loop)."""

from .navigation import validate_url, navigate
from .accessibility import build_tree, fetch_accessibility_tree
from .scripts import run_script

__all__ = [
    "validate_url",
    "navigate",
    "build_tree",
    "fetch_accessibility_tree",
    "run_script",
]
