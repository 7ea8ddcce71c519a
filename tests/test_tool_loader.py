"""Tests for resolving the advisor's tool registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from retirement_advisor.tools.lib import tool_loader
from retirement_advisor.tools.lib.tool_loader import ToolRegistryError


def write_registry(tmp_path: Path, text: str) -> Path:
    registry_file = tmp_path / "tools.yaml"
    registry_file.write_text(text, encoding="utf-8")
    return registry_file


@pytest.fixture
def echo_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / "echo_tools.py").write_text(
        "from strands import tool\n"
        "LIMIT = 3\n"
        "@tool\n"
        "def echo(text: str) -> str:\n"
        "    return text\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    return "echo_tools"


def test_registry_entries_resolve_in_order(tmp_path: Path, echo_module: str) -> None:
    registry_file = write_registry(tmp_path, f"- {echo_module}:echo\n")

    tools = tool_loader.load_tool_registry(registry_file)

    assert len(tools) == 1
    assert tools[0]("hello") == "hello"


def test_default_path_is_module_level_constant(
    tmp_path: Path, echo_module: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(tool_loader, "TOOLS_FILE", write_registry(tmp_path, f"- {echo_module}:echo\n"))

    assert len(tool_loader.load_tool_registry()) == 1


def test_missing_registry_means_no_tools(tmp_path: Path) -> None:
    assert tool_loader.load_tool_registry(tmp_path / "absent.yaml") == []


def test_empty_registry_means_no_tools(tmp_path: Path) -> None:
    assert tool_loader.load_tool_registry(write_registry(tmp_path, "# nothing yet\n")) == []


@pytest.mark.parametrize(
    "text",
    [
        "{bad: value}\n",  # mapping, not a list
        "- [nested]\n",
        "- ''\n",
        "- 'tools: [unclosed\n",  # YAML syntax error
    ],
)
def test_malformed_registry_rejected(tmp_path: Path, text: str) -> None:
    with pytest.raises(ToolRegistryError):
        tool_loader.load_tool_registry(write_registry(tmp_path, text))


def test_duplicate_entry_rejected(tmp_path: Path, echo_module: str) -> None:
    registry_file = write_registry(tmp_path, f"- {echo_module}:echo\n- {echo_module}:echo\n")

    with pytest.raises(ToolRegistryError, match="more than once"):
        tool_loader.load_tool_registry(registry_file)


@pytest.mark.parametrize(
    ("reference", "message"),
    [
        ("echo_tools", "module:function"),
        ("echo_tools:missing", "no attribute"),
        ("echo_tools:LIMIT", "not callable"),
        ("no_such_module_xyz:echo", "Unable to import"),
    ],
)
def test_bad_reference_rejected(echo_module: str, reference: str, message: str) -> None:
    with pytest.raises(ToolRegistryError, match=message):
        tool_loader.resolve_tool(reference)


def test_shipped_registry_resolves_every_tool() -> None:
    references = tool_loader.read_registry(tool_loader.TOOLS_FILE)
    tools = tool_loader.load_tool_registry()

    assert len(references) == 25
    assert len(tools) == 25
    assert all(reference.startswith("retirement_advisor.agents.tools.") for reference in references)
    assert all(callable(item) for item in tools)
