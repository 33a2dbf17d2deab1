"""Render an annotated accessibility tree as indented text."""

INDENT = "  "


def _node_states(node: dict) -> list[str]:
    states = []
    if node.get("disabled"):
        states.append("disabled")
    if node.get("checked") is True:
        states.append("checked")
    if node.get("checked") == "mixed":
        states.append("mixed")
    if node.get("expanded") is True:
        states.append("expanded")
    if node.get("expanded") is False:
        states.append("collapsed")
    if node.get("selected"):
        states.append("selected")
    if node.get("focused"):
        states.append("focused")
    if node.get("required"):
        states.append("required")
    if node.get("readonly"):
        states.append("readonly")
    return states


def format_node(node: dict) -> str:
    """
    Single-line description of one node, without indentation.

    Returns an empty string when the node has nothing to show. Note that
    ``value`` is tested for truthiness, so a value of 0 or "" is not rendered.
    """
    parts = []

    if node.get("uid"):
        parts.append(f"[{node['uid']}]")
    if node.get("role"):
        parts.append(node["role"])
    if node.get("name"):
        parts.append(f'"{node["name"]}"')
    if node.get("value"):
        parts.append(f'value="{node["value"]}"')

    states = _node_states(node)
    if states:
        parts.append(f"({', '.join(states)})")

    return " ".join(parts)


def format_tree(node: dict, depth: int = 0) -> str:
    """
    Pre-order text rendering, two spaces of indentation per level.

    A node with nothing to show produces no line, but its children are still
    rendered at their own depth.
    """
    result = ""

    line = format_node(node)
    if line:
        result += f"{INDENT * depth}{line}\n"

    for child in node.get("children") or ():
        result += format_tree(child, depth + 1)

    return result


__all__ = ["format_node", "format_tree"]
