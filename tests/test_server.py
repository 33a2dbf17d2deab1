"""Tests for the MCP tool entry points in __main__. The session is mocked."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock, patch

import pytest

from mcp_browser_inspect import __main__ as server


@pytest.fixture
def session():
    session = Mock(name="session")
    session.connect = AsyncMock(return_value=Mock(name="driver"))
    session.goto = AsyncMock()
    with patch.object(server, "get_context", return_value=SimpleNamespace(session=session)):
        yield session


def test_tools_are_registered(event_loop):
    tools = event_loop.run_until_complete(server.mcp.list_tools())
    by_name = {t.name: t for t in tools}

    assert set(by_name) == {"take_snapshot", "evaluate_script"}
    assert set(by_name["take_snapshot"].inputSchema["properties"]) == {"url", "verbose"}
    assert by_name["evaluate_script"].inputSchema["required"] == ["script"]


def test_take_snapshot_success(event_loop, session):
    with patch(
        "mcp_browser_inspect.tools.take_snapshot.fetch_accessibility_tree",
        return_value={"role": "link", "name": "Skip to content"},
    ):
        out = event_loop.run_until_complete(server.take_snapshot())

    assert out.isError is False
    assert out.content[0].text.endswith('[uid_1] link "Skip to content"\n')
    session.connect.assert_awaited_once()
    session.goto.assert_not_awaited()


def test_take_snapshot_navigates(event_loop, session):
    with patch(
        "mcp_browser_inspect.tools.take_snapshot.fetch_accessibility_tree",
        return_value=None,
    ):
        out = event_loop.run_until_complete(server.take_snapshot(url="https://example.com"))

    assert out.content[0].text == "No accessibility tree available for this page."
    session.goto.assert_awaited_once_with("https://example.com")


def test_invalid_protocol_fails_before_connecting(event_loop, session):
    out = event_loop.run_until_complete(server.take_snapshot(url="ftp://example.com"))

    assert out.isError is True
    text = out.content[0].text
    assert text.startswith("Error: Invalid arguments: url: ")
    assert "Invalid protocol: ftp:" in text
    session.connect.assert_not_awaited()


def test_evaluate_script_success(event_loop, session):
    session.connect.return_value.execute_script.return_value = 2

    out = event_loop.run_until_complete(server.evaluate_script(script="1+1"))

    assert out.isError is False
    assert out.content[0].text == "Script executed successfully:\n\n2"


def test_evaluate_script_error(event_loop, session):
    session.connect.return_value.execute_script.side_effect = RuntimeError("SyntaxError: Unexpected token")

    out = event_loop.run_until_complete(server.evaluate_script(script="1+"))

    assert out.isError is True
    assert out.content[0].text == "Error: SyntaxError: Unexpected token"


def test_connection_failure_is_reported(event_loop, session):
    from mcp_browser_inspect.errors import BrowserConnectionError

    session.connect.side_effect = BrowserConnectionError("Failed to launch Chrome: no binary")

    out = event_loop.run_until_complete(server.evaluate_script(script="1"))

    assert out.isError is True
    assert out.content[0].text == "Error: Failed to launch Chrome: no binary"


def test_cleanup_closes_connected_session(session):
    session.is_connected.return_value = True
    server.cleanup()
    session.shutdown.assert_called_once()


def test_cleanup_without_browser(session):
    session.is_connected.return_value = False
    server.cleanup()
    session.shutdown.assert_not_called()


def test_call_tool_through_mcp(event_loop, session):
    session.connect.return_value.execute_script.return_value = {"ok": True}

    result = event_loop.run_until_complete(
        server.mcp.call_tool("evaluate_script", {"script": "({ok: true})"})
    )

    # FastMCP hands back our CallToolResult unchanged
    assert result.isError is False
    assert result.content[0].text == 'Script executed successfully:\n\n{\n  "ok": true\n}'


def test_call_tool_missing_argument_uses_error_format(event_loop, session):
    result = event_loop.run_until_complete(server.mcp.call_tool("evaluate_script", {}))

    assert result.isError is True
    assert result.content[0].text == "Error: Invalid arguments: script: Field required"
    session.connect.assert_not_awaited()


def test_call_tool_wrong_argument_type_uses_error_format(event_loop, session):
    result = event_loop.run_until_complete(
        server.mcp.call_tool("take_snapshot", {"verbose": {"x": 1}})
    )

    assert result.isError is True
    assert result.content[0].text.startswith("Error: Invalid arguments: verbose: ")
    session.connect.assert_not_awaited()


def test_call_tool_unknown_tool_still_raises(event_loop):
    from mcp.server.fastmcp.exceptions import ToolError

    with pytest.raises(ToolError, match="Unknown tool"):
        event_loop.run_until_complete(server.mcp.call_tool("click", {}))
