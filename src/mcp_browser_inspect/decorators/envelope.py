# mcp_browser_inspect/decorators/envelope.py

import asyncio
import inspect
import functools
from typing import Any, Callable

from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError

from ..config.environment import include_error_tracebacks

import logging
logger = logging.getLogger(__name__)


__all__ = [
    "tool_envelope",
    "describe_error",
    "text_result",
]


def describe_error(err: BaseException) -> str:
    """
    Human-readable one-line message for an exception.

    Pydantic validation errors are flattened to "field: message" pairs.
    """
    if isinstance(err, ValidationError):
        details = []
        for item in err.errors():
            loc = ".".join(str(part) for part in item.get("loc", ())) or "arguments"
            details.append(f"{loc}: {item.get('msg', 'invalid value')}")
        return "Invalid arguments: " + "; ".join(details)
    message = str(err)
    return message or err.__class__.__name__


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error,
    )


def tool_envelope(func: Callable):
    """
    Outermost decorator for MCP tool functions:
      - Works with both async and sync callables.
      - On success: wraps the returned text in a CallToolResult.
      - On error: logs the failure and returns "Error: <message>" with isError=True,
        so no exception ever reaches the transport.
    Environment:
      - Set MBI_TOOL_ERRORS_TRACEBACK=0 to keep tracebacks out of the log.
    """

    def _normalize(value: Any) -> CallToolResult:
        if isinstance(value, CallToolResult):
            return value
        if value is None:
            return text_result("")
        return text_result(value if isinstance(value, str) else str(value))

    def _error_result(err: Exception) -> CallToolResult:
        logger.error(
            f"Tool {func.__name__} failed: {err.__class__.__name__}: {err}",
            exc_info=include_error_tracebacks(),
        )
        return text_result(f"Error: {describe_error(err)}", is_error=True)

    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                result = await func(*args, **kwargs)
            except asyncio.CancelledError:
                # Preserve cooperative cancellation semantics
                raise
            except Exception as e:
                return _error_result(e)
            return _normalize(result)
        return wrapper
    else:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                return _error_result(e)
            return _normalize(result)
        return wrapper
