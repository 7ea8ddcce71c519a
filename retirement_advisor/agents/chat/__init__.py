"""Chat agent building blocks."""

from __future__ import annotations

from .model_registry import (
    MODEL_REGISTRY,
    PROVIDERS,
    ModelClient,
    ModelConfig,
    ModelProvider,
    ProviderSettings,
    ModelRegistryError,
    MissingAPIKeyError,
    MissingDependencyError,
    UnknownModelError,
    create_model_client,
    get_model_config,
)
from .prompts import SYSTEM_PROMPT, resolve_system_prompt
from .runtime import AgentBuildError, build_agent

__all__ = [
    "MODEL_REGISTRY",
    "PROVIDERS",
    "SYSTEM_PROMPT",
    "AgentBuildError",
    "ModelClient",
    "ModelConfig",
    "ModelProvider",
    "ProviderSettings",
    "ModelRegistryError",
    "MissingAPIKeyError",
    "MissingDependencyError",
    "UnknownModelError",
    "build_agent",
    "create_model_client",
    "get_model_config",
    "resolve_system_prompt",
]
