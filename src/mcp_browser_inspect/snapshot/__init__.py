"""Accessibility snapshot annotation and formatting."""

from .annotator import UidCounter, annotate, is_uid_eligible
from .formatter import format_node, format_tree

__all__ = [
    "UidCounter",
    "annotate",
    "is_uid_eligible",
    "format_node",
    "format_tree",
]
