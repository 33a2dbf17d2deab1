"""Utility helpers."""

from .diagnostics import collect_diagnostics

__all__ = ["collect_diagnostics"]
