"""Configuration service for FitPlan.

Updates:
    v0.1.0 - 2026-10-19 - Settings, workflow model and provider registries.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config_loader import ConfigLoader

DEFAULT_EXPORT_FILENAME = "fitness-plan.pdf"


@dataclass(slots=True, frozen=True)
class WorkflowModelConfig:
    """Workflow-specific model parameters."""

    workflow: str
    model: str
    temperature: float | None = None
    provider: str | None = None
    max_tokens: int | None = None
    timeout: float | None = None


@dataclass(slots=True, frozen=True)
class ExportConfig:
    """Document export parameters."""

    filename: str = DEFAULT_EXPORT_FILENAME
    title: str = "Your Personalized Fitness Journey"


class ConfigService:
    """Loads and exposes configuration for FitPlan components."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Read the settings, models and providers files.

        Args:
            config_path (Path | None): Optional override for the configuration directory.
        """

        self._loader = ConfigLoader(base_path=config_path)
        self._settings = self._loader.load("settings")
        self._models = self._loader.load("models")
        self._providers = self._loader.load_optional("providers")

    @property
    def app_metadata(self) -> dict[str, Any]:
        """Return general application metadata."""
        return self._section(self._settings, "app")

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return logging configuration settings."""
        return self._section(self._settings, "logging")

    @property
    def api_config(self) -> dict[str, Any]:
        return self._section(self._settings, "api")

    @property
    def export_config(self) -> ExportConfig:
        """Return the PDF export settings with defaults filled in."""

        section = self._section(self._settings, "export")
        defaults = ExportConfig()
        return ExportConfig(
            filename=str(section.get("filename") or defaults.filename),
            title=str(section.get("title") or defaults.title),
        )

    @property
    def providers(self) -> dict[str, Any]:
        """Return provider configuration registry with `${VAR}` values expanded."""
        provider_section = self._providers.get("providers", {})
        if not isinstance(provider_section, dict):
            return {}
        return {
            name: self._expand_env_values(config)
            for name, config in provider_section.items()
        }

    def get_workflow_model_config(self, workflow: str) -> WorkflowModelConfig:
        """Return configuration for the requested workflow.

        Args:
            workflow (str): Name of the workflow to retrieve.

        Returns:
            WorkflowModelConfig: Workflow-specific model settings.

        Raises:
            KeyError: If the workflow configuration is missing.
            ValueError: If the workflow has no model identifier.
        """

        workflows = self._models.get("workflows", {})
        defaults = self._models.get("defaults", {})
        data = workflows.get(workflow)

        if not isinstance(data, dict):
            raise KeyError(f"Workflow config not found for '{workflow}'")

        model = data.get("model", defaults.get("model"))
        if not isinstance(model, str) or not model.strip():
            raise ValueError(
                f"Workflow config for '{workflow}' requires a non-empty 'model' value."
            )

        return WorkflowModelConfig(
            workflow=workflow,
            model=model.strip(),
            temperature=data.get("temperature", defaults.get("temperature")),
            provider=data.get("provider", defaults.get("provider")),
            max_tokens=data.get("max_tokens", defaults.get("max_tokens")),
            timeout=data.get("timeout", defaults.get("timeout")),
        )

    @staticmethod
    def clear_cache() -> None:
        """Clear cached configuration to reflect file updates."""

        ConfigLoader.load.cache_clear()

    @staticmethod
    def _section(document: dict[str, Any], key: str) -> dict[str, Any]:
        section = document.get(key, {})
        return dict(section) if isinstance(section, dict) else {}

    @staticmethod
    def _expand_env_values(value: Any, *, current_key: str | None = None) -> Any:
        if isinstance(value, dict):
            return {
                key: ConfigService._expand_env_values(entry, current_key=key)
                for key, entry in value.items()
            }
        if isinstance(value, list):
            return [
                ConfigService._expand_env_values(item, current_key=current_key)
                for item in value
            ]
        if isinstance(value, str) and current_key != "api_key_env":
            return os.path.expandvars(value)
        return value
