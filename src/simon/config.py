"""Configuration management for the Simon assistant."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = "~/.simon"


@dataclass
class ConfigModel:
    """User configuration for Simon."""

    # File paths
    data_file: str = "~/.simon/tasks.md"

    # UI preferences
    no_color: bool = False
    suggest_commands: bool = True  # "did you mean ..." on unknown commands

    def __post_init__(self):
        self.data_file = os.path.expanduser(self.data_file)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_file": self.data_file,
            "no_color": self.no_color,
            "suggest_commands": self.suggest_commands,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_data_path(self) -> Path:
        """Get the task file path."""
        return Path(self.data_file)


def get_config_path() -> Path:
    """Get the default config file path."""
    return Path(os.path.expanduser(DEFAULT_CONFIG_DIR)) / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, falling back to defaults."""
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"No config at {config_path}, using defaults")
        return ConfigModel()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = ConfigModel.from_yaml(f.read())
        logger.debug(f"Loaded configuration from {config_path}")
        return config
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        return ConfigModel()


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(config.to_yaml())
    logger.debug(f"Configuration saved to {config_path}")
