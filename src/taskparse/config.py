"""Configuration management for the parse-task command."""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = Path("~/.taskparse/config.yaml")


@dataclass
class ConfigModel:
    """Settings for the parse-task command line tool."""

    # Language settings
    default_language: str = "de"
    fallback_language: str = "de"

    # Display preferences
    date_format: str = "%Y-%m-%d"
    time_format: str = "%H:%M"
    no_color: bool = False

    # Custom keyword tables: language code -> YAML file
    custom_languages: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Post-initialization setup."""
        self.default_language = str(self.default_language).strip().lower()
        self.fallback_language = str(self.fallback_language).strip().lower()
        self.custom_languages = {
            str(code).strip().lower(): os.path.expanduser(str(path))
            for code, path in (self.custom_languages or {}).items()
        }

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "default_language": self.default_language,
            "fallback_language": self.fallback_language,
            "date_format": self.date_format,
            "time_format": self.time_format,
            "no_color": self.no_color,
            "custom_languages": self.custom_languages,
        }
        return yaml.dump(data, default_flow_style=False, allow_unicode=True)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML.

        Raises:
            ValueError: If the document is not a mapping of known settings
        """
        data = yaml.safe_load(yaml_str)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")
        values: Dict[str, Any] = {k: v for k, v in data.items() if k in known}

        if not isinstance(values.get("custom_languages", {}), dict):
            raise ValueError("'custom_languages' must be a mapping of code to file")
        return cls(**values)


class Config:
    """Configuration manager for parse-task."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> ConfigModel:
        """Load configuration from file, or defaults if there is none.

        Loading never creates files.
        """
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()
        path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()

        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.info(f"Loaded configuration from {path}")
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load config from {path}: {e}")
                logger.warning("Using default configuration.")
        else:
            logger.debug(f"No configuration at {path}, using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Union[str, Path]] = None) -> None:
        """Save configuration to file."""
        path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(config.to_yaml())
        logger.info(f"Configuration saved to {path}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Union[str, Path]] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Union[str, Path]] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)
