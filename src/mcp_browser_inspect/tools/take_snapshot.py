"""Accessibility snapshot tool implementation."""

import asyncio

from ..actions.accessibility import fetch_accessibility_tree
from ..constants import NO_TREE_MESSAGE, SEPARATOR_WIDTH
from ..snapshot import UidCounter, annotate, format_tree
from .schemas import TakeSnapshotArgs


def render_snapshot(tree: dict, verbose: bool = False) -> str:
    """
    Annotate ``tree`` in place and render it with the summary header.

    A fresh uid counter is used for every call.
    """
    counter = UidCounter()
    annotate(tree, verbose, counter)
    formatted = format_tree(tree)

    summary = f"Accessibility Snapshot ({counter.value} interactive elements)\n"
    separator = "=" * SEPARATOR_WIDTH + "\n"
    return summary + separator + formatted


async def take_snapshot(driver, browser, args: TakeSnapshotArgs) -> str:
    """
    Take a text snapshot of the page's accessibility tree.

    Args:
        driver: The connected WebDriver (page handle).
        browser: The BrowserSession, used for navigation.
        args: Validated tool arguments.

    Returns:
        str: Summary line, separator and the indented tree, or the
        no-tree message when the page exposes no accessibility tree.
    """
    if args.url:
        await browser.goto(args.url)

    tree = await asyncio.to_thread(fetch_accessibility_tree, driver)
    if tree is None:
        return NO_TREE_MESSAGE

    return render_snapshot(tree, args.verbose)


__all__ = ["render_snapshot", "take_snapshot"]
