# mcp_browser_inspect/decorators/__init__.py

from .envelope import tool_envelope, describe_error, text_result

__all__ = [
    "tool_envelope",
    "describe_error",
    "text_result",
]
