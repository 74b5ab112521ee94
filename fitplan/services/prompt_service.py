"""Prompt templates named in `prompts/registry.yaml`."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Tuple

from ..core.config_loader import PROJECT_ROOT, ConfigLoader

REGISTRY_NAME = "registry"
DEFAULT_PROMPTS_DIR = PROJECT_ROOT / "prompts"


class PromptService:
    """Resolve template names to files and cache the text once read.

    The prompts directory is `base_path`, else `FITPLAN_PROMPTS_PATH`, else
    `<project>/prompts`. Registry entries map a name to a file; relative
    paths are taken from the prompts directory.
    """

    def __init__(self, base_path: Path | None = None) -> None:
        directory = base_path or Path(os.environ.get("FITPLAN_PROMPTS_PATH", DEFAULT_PROMPTS_DIR))
        loader = ConfigLoader(base_path=directory)
        self._paths = _read_registry(loader.load(REGISTRY_NAME), loader.base_path)
        self._templates: Dict[str, str] = {}

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._paths))

    def path_for(self, name: str) -> Path:
        try:
            return self._paths[name]
        except KeyError:
            raise KeyError(f"Prompt '{name}' is not defined in the registry.") from None

    def get_prompt(self, name: str) -> str:
        """Return the template text for `name`, reading the file on first use.

        Raises:
            KeyError: If the registry has no such entry.
            FileNotFoundError: If the registered file is missing.
        """

        if name not in self._templates:
            path = self.path_for(name)
            if not path.is_file():
                raise FileNotFoundError(f"Prompt file not found: {path}")
            self._templates[name] = path.read_text(encoding="utf-8")
        return self._templates[name]


def _read_registry(entries: dict, base: Path) -> Dict[str, Path]:
    paths: Dict[str, Path] = {}
    for name, location in entries.items():
        if not isinstance(name, str) or not isinstance(location, str) or not location.strip():
            raise ValueError(f"Invalid prompt registry entry: {name!r}: {location!r}")
        path = Path(location)
        paths[name] = path if path.is_absolute() else (base / path).resolve()
    return paths
