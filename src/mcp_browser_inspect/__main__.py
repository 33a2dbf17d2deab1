#region Overview
"""
## What this server does

Lets an AI agent look at live webpages through two MCP tools:

* `take_snapshot` returns the page's accessibility tree as indented text. Every
  interactive element (buttons, links, text fields, ...) gets an id like
  `[uid_3]`. In verbose mode every element with a role gets one and descriptive
  attributes are kept.
* `evaluate_script` runs JavaScript in the page and returns the JSON result.

Both tools accept an optional `url` to load first.

## Browser handling

The first tool call launches Chrome (through Selenium) and opens one tab. All
later calls reuse that tab. Set `CHROME_HEADLESS=true` to run without a window.
Chrome is closed when the server exits.

uids are numbered per snapshot. They are not stable between snapshots: if the
page changes, the same button may get a different uid next time.

## Errors

Tools never crash the connection. A failure comes back as text starting with
`Error: ` and the result is flagged as an error.
"""
#endregion

#region Imports
import sys
import signal
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import CallToolResult
from pydantic import ValidationError
#endregion

#region Import from your package
from mcp_browser_inspect.config import get_log_file, get_log_level
from mcp_browser_inspect.context import get_context
from mcp_browser_inspect.decorators import describe_error, text_result, tool_envelope
from mcp_browser_inspect.tools import (
    EvaluateScriptArgs,
    TakeSnapshotArgs,
    evaluate_script as _evaluate_script,
    take_snapshot as _take_snapshot,
)
#endregion

#region Logger
logger = logging.getLogger(__name__)
#endregion

#region Logging
def configure_logging() -> None:
    """
    Log to a file and to stderr.

    stdout is the MCP stdio transport and must only carry protocol messages.
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    log_file = get_log_file()
    try:
        handlers.append(logging.FileHandler(log_file))
    except OSError as e:
        print(f"Cannot open log file {log_file}: {e}", file=sys.stderr)

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
#endregion

#region FastMCP Initialization
class InspectorMCP(FastMCP):
    """
    FastMCP validates arguments against the tool signature before the tool
    body runs. Those failures are reported in the same "Error: ..." form as
    everything tool_envelope catches.
    """

    async def call_tool(self, name, arguments):
        try:
            return await super().call_tool(name, arguments)
        except ToolError as e:
            if not isinstance(e.__cause__, ValidationError):
                raise
            logger.error(f"Tool {name} called with invalid arguments: {e.__cause__}")
            return text_result(f"Error: {describe_error(e.__cause__)}", is_error=True)


mcp = InspectorMCP("mcp_browser_inspect")
#endregion

#region Tools
@mcp.tool()
@tool_envelope
async def take_snapshot(url: Optional[str] = None, verbose: bool = False) -> CallToolResult:
    """
    Take a text-based snapshot of the page using the accessibility tree.

    This provides a semantic representation of the page structure with unique
    IDs for interactive elements. Essential for understanding page state and
    enabling precise element interaction.

    Args:
        url: URL to navigate to before taking snapshot (optional).
        verbose: Include detailed accessibility information and give every
            element with a role a uid (default: false).

    Returns:
        A summary line with the number of uids, a separator, and one indented
        line per element, e.g. `[uid_1] button "Sign in" (disabled)`.
    """
    args = TakeSnapshotArgs(url=url, verbose=verbose)
    session = get_context().session
    driver = await session.connect()
    return await _take_snapshot(driver, session, args)


@mcp.tool()
@tool_envelope
async def evaluate_script(script: str, url: Optional[str] = None) -> CallToolResult:
    """
    Execute custom JavaScript code in the page context.

    Useful for extracting specific DOM information, testing JavaScript
    functions, or getting data not available through the accessibility tree.

    Args:
        script: JavaScript code to execute. Can be an expression
            (e.g. "document.title") or a function that returns a value
            (e.g. "() => [...document.links].length"). Promises are awaited.
        url: URL to navigate to before executing script (optional).

    Returns:
        "Script executed successfully:" followed by the result as pretty-printed JSON.
    """
    args = EvaluateScriptArgs(script=script, url=url)
    session = get_context().session
    driver = await session.connect()
    return await _evaluate_script(driver, session, args)
#endregion

#region Lifecycle
def cleanup() -> None:
    """Close Chrome if it is running."""
    session = get_context().session
    if session.is_connected():
        logger.info("Cleaning up...")
        session.shutdown()


def _handle_signal(signum, frame) -> None:
    logger.info(f"Received signal {signum}, shutting down")
    cleanup()
    sys.exit(0)


def main() -> None:
    configure_logging()

    signal.signal(signal.SIGTERM, _handle_signal)
    signal.signal(signal.SIGINT, _handle_signal)

    try:
        ctx = get_context()
    except EnvironmentError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info(f"mcp_browser_inspect server running on stdio (headless={ctx.session.headless})")
    try:
        mcp.run()
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)
    finally:
        cleanup()
#endregion


if __name__ == "__main__":
    main()
