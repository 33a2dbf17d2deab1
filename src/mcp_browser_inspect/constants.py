"""
Global constants and configuration defaults.
No dependencies - safe to import from anywhere.
"""

# ============================================================================
# Snapshot Configuration
# ============================================================================

INTERACTIVE_ROLES = frozenset({
    "button",
    "link",
    "textbox",
    "searchbox",
    "checkbox",
    "radio",
    "combobox",
    "listbox",
    "option",
    "menuitem",
    "tab",
    "switch",
    "slider",
    "spinbutton",
})
"""Roles that receive a uid in non-verbose snapshots."""

VERBOSE_ONLY_FIELDS = (
    "description",
    "keyshortcuts",
    "roledescription",
    "valuetext",
    "autocomplete",
    "haspopup",
    "invalid",
    "orientation",
)
"""Descriptive node attributes kept only in verbose snapshots."""

SEPARATOR_WIDTH = 60
"""Width of the '=' rule below the snapshot summary line."""

NO_TREE_MESSAGE = "No accessibility tree available for this page."
"""Returned instead of a snapshot when the page exposes no accessibility tree."""


# ============================================================================
# Navigation Configuration
# ============================================================================

DEFAULT_NAVIGATION_TIMEOUT_MS = 30_000
"""Default page load timeout in milliseconds (override with MCP_NAVIGATION_TIMEOUT_MS)."""

ALLOWED_SCHEMES = ("http", "https")
"""URL schemes the browser is allowed to navigate to."""


# ============================================================================
# Script Evaluation
# ============================================================================

SCRIPT_SUCCESS_PREAMBLE = "Script executed successfully:\n\n"
"""Prefix of every successful evaluate_script result."""


__all__ = [
    "INTERACTIVE_ROLES",
    "VERBOSE_ONLY_FIELDS",
    "SEPARATOR_WIDTH",
    "NO_TREE_MESSAGE",
    "DEFAULT_NAVIGATION_TIMEOUT_MS",
    "ALLOWED_SCHEMES",
    "SCRIPT_SUCCESS_PREAMBLE",
]
