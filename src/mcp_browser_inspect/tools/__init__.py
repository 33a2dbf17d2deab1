# mcp_browser_inspect/tools/__init__.py
"""
MCP tool implementations.

Each tool takes the connected driver, the BrowserSession and its validated
argument model, and returns plain text. Errors are left to propagate; the
tool_envelope decorator in __main__ turns them into error results.
"""

from .schemas import TakeSnapshotArgs, EvaluateScriptArgs
from .take_snapshot import take_snapshot, render_snapshot
from .evaluate_script import evaluate_script, serialize_result

__all__ = [
    # Arguments
    'TakeSnapshotArgs',
    'EvaluateScriptArgs',
    # Snapshot
    'take_snapshot',
    'render_snapshot',
    # Scripts
    'evaluate_script',
    'serialize_result',
]
