"""
Accessibility tree retrieval over the Chrome DevTools Protocol.

Accessibility.getFullAXTree returns a flat list of AX nodes that reference each
other through nodeId/childIds. This module rebuilds the nested tree and reduces
each CDP node to a plain dict with the keys the snapshot formatter understands:

    {"role": "button", "name": "Sign in", "disabled": True, "children": [...]}

Ignored nodes, inline text boxes and unnamed generic containers are collapsed:
they disappear and their children take their place in the parent, in order.
"""

from typing import Optional

import logging
logger = logging.getLogger(__name__)


# Roles that are always collapsed into their parent
_SKIP_ROLES = frozenset({"InlineTextBox"})

# Roles collapsed into their parent unless they carry a name
_TRANSPARENT_ROLES = frozenset({"generic", "none"})

# CDP property name -> node key
_BOOLEAN_PROPERTIES = {
    "disabled": "disabled",
    "expanded": "expanded",
    "focused": "focused",
    "modal": "modal",
    "multiline": "multiline",
    "multiselectable": "multiselectable",
    "readonly": "readonly",
    "required": "required",
    "selected": "selected",
}
_TRISTATE_PROPERTIES = {"checked": "checked", "pressed": "pressed"}
_NUMERIC_PROPERTIES = {"level": "level", "valuemin": "valuemin", "valuemax": "valuemax"}
_TOKEN_PROPERTIES = {
    "autocomplete": "autocomplete",
    "haspopup": "haspopup",
    "invalid": "invalid",
    "orientation": "orientation",
    "keyshortcuts": "keyshortcuts",
    "roledescription": "roledescription",
    "valuetext": "valuetext",
}


def _ax_value(ax_value: Optional[dict]):
    """Unwrap a CDP AXValue ({"type": ..., "value": ...})."""
    if not isinstance(ax_value, dict):
        return None
    return ax_value.get("value")


def _tristate(raw):
    if raw in (True, "true"):
        return True
    if raw in (False, "false"):
        return False
    if raw == "mixed":
        return "mixed"
    return None


def _apply_properties(node: dict, properties: list, is_root: bool) -> None:
    for prop in properties or ():
        name = prop.get("name")
        raw = _ax_value(prop.get("value"))

        if name in _BOOLEAN_PROPERTIES:
            key = _BOOLEAN_PROPERTIES[name]
            if key == "focused" and is_root:
                continue
            value = raw in (True, "true")
            # expanded=false is a real state (collapsed); other false booleans are noise
            if value or key == "expanded":
                node[key] = value
        elif name in _TRISTATE_PROPERTIES:
            value = _tristate(raw)
            if value is not None:
                node[_TRISTATE_PROPERTIES[name]] = value
        elif name in _NUMERIC_PROPERTIES:
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                node[_NUMERIC_PROPERTIES[name]] = raw
        elif name in _TOKEN_PROPERTIES:
            if raw not in (None, "", False):
                node[_TOKEN_PROPERTIES[name]] = raw


def _build_node(ax_node: dict, is_root: bool) -> dict:
    node = {}

    role = _ax_value(ax_node.get("role"))
    if role:
        node["role"] = role

    name = _ax_value(ax_node.get("name"))
    if name not in (None, ""):
        node["name"] = name

    value = _ax_value(ax_node.get("value"))
    if value not in (None, ""):
        node["value"] = value

    description = _ax_value(ax_node.get("description"))
    if description:
        node["description"] = description

    _apply_properties(node, ax_node.get("properties"), is_root)
    return node


def _is_collapsed(ax_node: dict) -> bool:
    if ax_node.get("ignored"):
        return True
    role = _ax_value(ax_node.get("role"))
    if role in _SKIP_ROLES:
        return True
    if role in _TRANSPARENT_ROLES and not _ax_value(ax_node.get("name")):
        return True
    return False


def build_tree(ax_nodes: list) -> Optional[dict]:
    """
    Convert the flat CDP node list into a nested AccessibilityNode dict.

    Returns None for an empty list. The root is the node without a parentId
    (falling back to the first node) and is always kept, even if ignored.
    """
    if not ax_nodes:
        return None

    node_map = {}
    for ax_node in ax_nodes:
        node_id = ax_node.get("nodeId")
        if node_id is not None:
            node_map[str(node_id)] = ax_node

    root_ax = next((n for n in ax_nodes if not n.get("parentId")), ax_nodes[0])
    seen = set()

    def _children(ax_node: dict) -> list:
        children = []
        for child_id in ax_node.get("childIds") or ():
            child_id = str(child_id)
            child_ax = node_map.get(child_id)
            if child_ax is None or child_id in seen:
                continue
            seen.add(child_id)
            if _is_collapsed(child_ax):
                children.extend(_children(child_ax))
            else:
                children.append(_convert(child_ax, is_root=False))
        return children

    def _convert(ax_node: dict, is_root: bool) -> dict:
        node = _build_node(ax_node, is_root)
        children = _children(ax_node)
        if children:
            node["children"] = children
        return node

    seen.add(str(root_ax.get("nodeId")))
    return _convert(root_ax, is_root=True)


def fetch_accessibility_tree(driver) -> Optional[dict]:
    """
    Read the full accessibility tree of the current page.

    Returns:
        The root node dict, or None when the page exposes no accessibility tree.
    """
    logger.info("Taking accessibility snapshot...")
    result = driver.execute_cdp_cmd("Accessibility.getFullAXTree", {}) or {}
    ax_nodes = result.get("nodes") or []
    logger.debug(f"Received {len(ax_nodes)} AX nodes")
    return build_tree(ax_nodes)


__all__ = ["build_tree", "fetch_accessibility_tree"]
