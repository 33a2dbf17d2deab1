"""
MCP server for inspecting live webpages.

One server process drives one Chrome tab. Tools:

- take_snapshot: accessibility tree as text, interactive elements tagged
  with per-snapshot uids.
- evaluate_script: run JavaScript in the page and return the JSON result.

Run with `python -m mcp_browser_inspect` or the `mcp-browser-inspect` script.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
