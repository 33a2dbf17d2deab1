"""UID assignment and verbose-field pruning for accessibility trees."""

from dataclasses import dataclass
from typing import Optional

from ..constants import INTERACTIVE_ROLES, VERBOSE_ONLY_FIELDS


@dataclass
class UidCounter:
    """Running uid count for one snapshot. Create a new one per snapshot."""

    value: int = 0

    def next_uid(self) -> str:
        self.value += 1
        return f"uid_{self.value}"


def is_uid_eligible(node: dict, verbose: bool) -> bool:
    """
    Interactive controls are always addressable. In verbose mode every node
    with a role is.
    """
    role = node.get("role")
    if not role:
        return False
    return verbose or role in INTERACTIVE_ROLES


def annotate(node: dict, verbose: bool, counter: Optional[UidCounter] = None) -> int:
    """
    Walk the tree in pre-order, adding a ``uid`` to every eligible node and,
    unless ``verbose``, removing the verbose-only fields from every node.

    The tree is mutated in place. Nodes are never removed or reordered.

    Args:
        node: Root of the accessibility tree (as returned by fetch_accessibility_tree).
        verbose: Keep descriptive fields and give every roled node a uid.
        counter: Counter to continue from. A fresh one is used when omitted.

    Returns:
        int: The number of uids assigned so far, i.e. ``counter.value``.
    """
    if counter is None:
        counter = UidCounter()

    if is_uid_eligible(node, verbose):
        node["uid"] = counter.next_uid()

    if not verbose:
        for field_name in VERBOSE_ONLY_FIELDS:
            node.pop(field_name, None)

    for child in node.get("children") or ():
        annotate(child, verbose, counter)

    return counter.value


__all__ = ["UidCounter", "is_uid_eligible", "annotate"]
