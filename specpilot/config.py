"""
SpecPilot tool configuration.

Per-project defaults stored in .specpilot.yaml at the project root:

    specs_name: .specs
    author: Jane Doe
    language: python
    framework: fastapi

SPECPILOT_SPECS_NAME and SPECPILOT_AUTHOR override the file values.
CLI flags override both.
"""

import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from specpilot.documents import DEFAULT_SPECS_NAME
from specpilot.errors import ConfigError


CONFIG_FILENAME = ".specpilot.yaml"

ENV_SPECS_NAME = "SPECPILOT_SPECS_NAME"
ENV_AUTHOR = "SPECPILOT_AUTHOR"

SUPPORTED_LANGUAGES: List[str] = ["typescript", "javascript", "python", "java"]

# Framework choices per language
FRAMEWORKS: Dict[str, List[str]] = {
    "typescript": ["react", "express", "next", "cli"],
    "javascript": ["express"],
    "python": ["fastapi", "django", "data-science"],
    "java": ["spring-boot"],
}


@dataclass
class SpecPilotConfig:
    """Defaults for init/validate/specify in one project."""
    specs_name: str = DEFAULT_SPECS_NAME
    author: str = "Your Name"
    language: str = "typescript"
    framework: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpecPilotConfig":
        defaults = cls()
        return cls(
            specs_name=str(data.get("specs_name") or defaults.specs_name),
            author=str(data.get("author") or defaults.author),
            language=str(data.get("language") or defaults.language),
            framework=data.get("framework") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if data["framework"] is None:
            del data["framework"]
        return data


def get_config_path(project_dir: Union[str, Path]) -> Path:
    """Get the config file path for a project."""
    return Path(project_dir) / CONFIG_FILENAME


def load_config(project_dir: Union[str, Path]) -> SpecPilotConfig:
    """Load project configuration. Returns defaults if not found.

    Raises:
        ConfigError: If the file exists but is not a YAML mapping
    """
    config_file = get_config_path(project_dir)

    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read {config_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"{config_file} must contain a mapping")
        config = SpecPilotConfig.from_dict(data)
    else:
        config = SpecPilotConfig()

    _apply_env(config)
    return config


def save_config(project_dir: Union[str, Path], config: SpecPilotConfig) -> None:
    """Save project configuration."""
    config_file = get_config_path(project_dir)
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, sort_keys=False)


def _apply_env(config: SpecPilotConfig) -> None:
    specs_name = os.environ.get(ENV_SPECS_NAME)
    if specs_name:
        config.specs_name = specs_name
    author = os.environ.get(ENV_AUTHOR)
    if author:
        config.author = author
