"""Resolve the advisor's tool list from ``config/tools.yaml``.

Each entry is a ``package.module:function`` reference. Entries are resolved in
file order; a bad entry stops loading so a misconfigured registry is noticed at
startup rather than when the model first reaches for the tool.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, List, Optional

import yaml

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
TOOLS_FILE = CONFIG_DIR / "tools.yaml"

logger = logging.getLogger(__name__)


class ToolRegistryError(RuntimeError):
    """Raised when the tool registry cannot be loaded."""


def load_tool_registry(registry_path: Optional[Path] = None) -> List[Any]:
    path = registry_path or TOOLS_FILE
    if not path.exists():
        logger.warning("Tool registry %s not found; running without tools", path)
        return []
    tools = [resolve_tool(reference) for reference in read_registry(path)]
    logger.debug("Loaded %d tools from %s", len(tools), path)
    return tools


def read_registry(path: Path) -> List[str]:
    """Return the registry's references, rejecting malformed or repeated ones."""

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ToolRegistryError(f"Unable to parse tool registry {path}: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, list):
        raise ToolRegistryError(f"Tool registry {path} must be a YAML list of module:function references.")

    references: List[str] = []
    for item in data:
        reference = item.strip() if isinstance(item, str) else ""
        if not reference:
            raise ToolRegistryError(f"Tool registry entries must be non-empty strings, got {item!r}.")
        if reference in references:
            raise ToolRegistryError(f"Tool '{reference}' is listed more than once.")
        references.append(reference)
    return references


def resolve_tool(reference: str) -> Any:
    module_path, _, attr = (part.strip() for part in reference.partition(":"))
    if not module_path or not attr:
        raise ToolRegistryError(f"Tool '{reference}' must be written as module:function.")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as exc:
        raise ToolRegistryError(f"Unable to import module '{module_path}' for tool '{reference}'") from exc
    tool_obj = getattr(module, attr, None)
    if tool_obj is None:
        raise ToolRegistryError(f"Module '{module_path}' has no attribute '{attr}'")
    if not callable(tool_obj):
        raise ToolRegistryError(f"Tool '{reference}' is not callable.")
    return tool_obj
