"""Shared utilities for the advisor CLI: config, profile storage, tool registry."""

from __future__ import annotations

from .config_loader import AdvisorConfig, ConfigError, load_base_config
from .profile_store import LoadProfileResult, ProfileStore, SaveProfileResult, default_profile_path
from .tool_loader import ToolRegistryError, load_tool_registry

__all__ = [
    "AdvisorConfig",
    "ConfigError",
    "LoadProfileResult",
    "ProfileStore",
    "SaveProfileResult",
    "ToolRegistryError",
    "default_profile_path",
    "load_base_config",
    "load_tool_registry",
]
