"""Configuration helpers for the advisor CLI."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.yaml"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(RuntimeError):
    """Raised when the CLI configuration is missing or invalid."""


@dataclass
class AdvisorConfig:
    """Strongly typed configuration for an advisor run."""

    model: str
    log_level: str = "WARNING"
    profile_path: Optional[str] = None
    system_prompt_file: Optional[str] = None

    @classmethod
    def from_mapping(cls, payload: Dict[str, Any]) -> "AdvisorConfig":
        try:
            model = str(payload["model"])
        except KeyError as exc:
            raise ConfigError(f"Missing required config key: {exc.args[0]}") from exc
        log_level = str(payload.get("log_level") or "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log_level '{log_level}' in config.yaml")
        profile_path = payload.get("profile_path")
        system_prompt_file = payload.get("system_prompt_file")
        return cls(
            model=model,
            log_level=log_level,
            profile_path=str(profile_path) if profile_path else None,
            system_prompt_file=str(system_prompt_file) if system_prompt_file else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "log_level": self.log_level,
            "profile_path": self.profile_path,
            "system_prompt_file": self.system_prompt_file,
        }

    def apply_overrides(
        self,
        *,
        model: Optional[str] = None,
        log_level: Optional[str] = None,
        profile_path: Optional[str] = None,
    ) -> "AdvisorConfig":
        return AdvisorConfig(
            model=model or self.model,
            log_level=(log_level or self.log_level).upper(),
            profile_path=profile_path or self.profile_path,
            system_prompt_file=self.system_prompt_file,
        )


def load_base_config(config_path: Optional[Path] = None) -> AdvisorConfig:
    """Load and validate the default configuration file."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        raise ConfigError(
            textwrap.dedent(
                f"""
                Missing required config file: {path}
                Create the file using the template shipped under retirement_advisor/tools/config/config.yaml.
                """
            ).strip()
        )
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Unable to parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("config.yaml must contain a mapping/object at the top level")
    return AdvisorConfig.from_mapping(data)
