"""Script evaluation tool implementation."""

import asyncio
import json

from ..actions.scripts import run_script
from ..constants import SCRIPT_SUCCESS_PREAMBLE
from .schemas import EvaluateScriptArgs


def serialize_result(value) -> str:
    """Pretty-print a script result as JSON (2-space indent)."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


async def evaluate_script(driver, browser, args: EvaluateScriptArgs) -> str:
    """
    Execute JavaScript in the page context and return the serialized result.

    Script errors propagate to the caller untouched.
    """
    if args.url:
        await browser.goto(args.url)

    result = await asyncio.to_thread(run_script, driver, args.script)
    return SCRIPT_SUCCESS_PREAMBLE + serialize_result(result)


__all__ = ["serialize_result", "evaluate_script"]
