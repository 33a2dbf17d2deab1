"""Configuration management for browser automation."""

from .environment import (
    get_env_config,
    is_headless,
    get_log_file,
    get_log_level,
    include_error_tracebacks,
)

__all__ = [
    "get_env_config",
    "is_headless",
    "get_log_file",
    "get_log_level",
    "include_error_tracebacks",
]
