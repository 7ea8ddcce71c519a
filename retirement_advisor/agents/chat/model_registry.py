"""LLM provider selection for the advisor agent.

Each model code maps to a provider; each provider knows which environment
variable holds its API key and which Strands model class talks to it. The
SDKs are imported lazily so the engine and tools work without them.
"""

from __future__ import annotations

import importlib
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

logger = logging.getLogger(__name__)


class ModelProvider(str, Enum):
    OPENAI = "openai"
    GEMINI = "gemini"


@dataclass(frozen=True)
class ProviderSettings:
    """How to authenticate with a provider and which Strands class wraps it."""

    api_key_env: str
    model_class: str  # "module:Class"
    install_hint: str
    required_modules: Tuple[str, ...] = ()


PROVIDERS: Dict[ModelProvider, ProviderSettings] = {
    ModelProvider.OPENAI: ProviderSettings(
        api_key_env="OPENAI_API_KEY",
        model_class="strands.models.openai:OpenAIModel",
        install_hint="pip install 'retirement-advisor[openai]'",
    ),
    ModelProvider.GEMINI: ProviderSettings(
        api_key_env="GOOGLE_AI_API_KEY",
        model_class="strands.models.gemini:GeminiModel",
        install_hint="pip install 'retirement-advisor[gemini]'",
        required_modules=("google.genai",),
    ),
}

# Kept for callers that only need the key name.
PROVIDER_API_KEY_ENV: Dict[ModelProvider, str] = {
    provider: settings.api_key_env for provider, settings in PROVIDERS.items()
}


@dataclass(frozen=True)
class ModelConfig:
    provider: ModelProvider
    model_id: str


@dataclass
class ModelClient:
    """A configured Strands model instance and where it came from."""

    provider: ModelProvider
    model_id: str
    client: object


class ModelRegistryError(RuntimeError):
    """Base error for model selection problems."""


class UnknownModelError(ModelRegistryError):
    """Raised when a model code is not in the registry."""


class MissingDependencyError(ModelRegistryError):
    """Raised when the provider's SDK is not installed."""


class MissingAPIKeyError(ModelRegistryError):
    """Raised when the provider's API key variable is unset."""


MODEL_REGISTRY: Dict[str, ModelConfig] = {
    "gpt-5.1-mini": ModelConfig(ModelProvider.OPENAI, "gpt-5.1-mini"),
    "gpt-5.1": ModelConfig(ModelProvider.OPENAI, "gpt-5.1"),
    "gemini-2.5-pro": ModelConfig(ModelProvider.GEMINI, "gemini-2.5-pro"),
    "gemini-2.5-flash": ModelConfig(ModelProvider.GEMINI, "gemini-2.5-flash"),
}


def get_model_config(model_code: str) -> ModelConfig:
    config = MODEL_REGISTRY.get(model_code)
    if config is None:
        known = ", ".join(sorted(MODEL_REGISTRY))
        raise UnknownModelError(f"Unknown model code: {model_code} (supported: {known})")
    return config


def create_model_client(model_code: str) -> ModelClient:
    """Build the Strands model for ``model_code``.

    The API key is checked before any SDK import so a missing key is reported
    even when the SDK is also absent.
    """

    config = get_model_config(model_code)
    settings = PROVIDERS[config.provider]
    api_key = os.environ.get(settings.api_key_env)
    if not api_key:
        raise MissingAPIKeyError(f"{settings.api_key_env} is not set (needed for {model_code}).")

    model_cls = _load_model_class(settings)
    logger.debug("Creating %s client for %s", config.provider.value, config.model_id)
    model = model_cls(client_args={"api_key": api_key}, model_id=config.model_id)
    return ModelClient(provider=config.provider, model_id=config.model_id, client=model)


def _load_model_class(settings: ProviderSettings) -> type:
    module_path, _, class_name = settings.model_class.partition(":")
    try:
        for required in settings.required_modules:
            importlib.import_module(required)
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(f"{exc.name} is not installed. Run: {settings.install_hint}") from exc
    return getattr(module, class_name)
