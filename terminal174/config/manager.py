"""Configuration manager for terminal174."""

from dataclasses import dataclass, asdict, fields
from typing import Dict, Any, List, Optional, Tuple
from pathlib import Path
import sys

import yaml

from ..constants import (
    CONFIG_FILE_NAME, DEFAULT_ENDPOINT, DEFAULT_API_KEY, DEFAULT_MODEL,
    get_default_config_dir
)
from ..utils.logging import logger
from ..utils.helpers import ensure_directory_exists, safe_file_write
from .templates import DEFAULT_SYSTEM_PROMPT, CONFIG_HEADER


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or saved."""


@dataclass
class Config:
    """Settings for the chat endpoint and the session's system prompt."""
    endpoint: str = DEFAULT_ENDPOINT
    api_key: str = DEFAULT_API_KEY
    model: str = DEFAULT_MODEL
    system_prompt: str = DEFAULT_SYSTEM_PROMPT

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> Tuple["Config", List[str]]:
        """Build a config from a parsed mapping, falling back per field.

        Returns:
            The reconciled config and the names of fields that took their default
        """
        defaults = cls()
        values = {}
        substituted = []
        for field in fields(cls):
            value = data.get(field.name)
            if isinstance(value, str):
                values[field.name] = value
            else:
                values[field.name] = getattr(defaults, field.name)
                substituted.append(field.name)
        return cls(**values), substituted


class _ConfigDumper(yaml.SafeDumper):
    """YAML dumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_ConfigDumper.add_representer(str, _represent_str)


def dump_config(config: Config) -> str:
    """Serialize a config to the YAML text stored on disk."""
    body = yaml.dump(
        config.to_dict(),
        Dumper=_ConfigDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return CONFIG_HEADER + body


def parse_config_text(text: str) -> Dict[str, Any]:
    """Parse YAML config text into a mapping.

    Raises:
        ConfigError: If the text is not valid YAML or not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration is not a valid YAML dictionary.")
    return data


class ConfigManager:
    """Manages configuration bootstrap, loading and reconciliation."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the configuration manager.

        Args:
            config_dir: Custom configuration directory path
        """
        self.config_dir = config_dir or get_default_config_dir()
        self.config_file = self.config_dir / CONFIG_FILE_NAME
        self._config: Optional[Config] = None

    def initialize(self) -> bool:
        """Set up the config directory and load the config.

        Returns:
            True if the config was loaded, False if a default file was just created
        """
        if not self._perform_initial_setup():
            return False

        self._config = self.load()
        return True

    def _perform_initial_setup(self) -> bool:
        """Creates the config directory and default file if they don't exist.

        Returns:
            True if no setup was needed, False if the default file was created
        """
        try:
            ensure_directory_exists(self.config_dir)
        except OSError as e:
            raise ConfigError(f"Could not create config directory {self.config_dir}: {e}") from e

        if self.config_file.exists():
            return True

        self.save(Config())
        logger.system(f"Created default config at {self.config_file}")
        logger.system("Please edit it with your API key and settings before continuing.")
        return False

    def load(self) -> Config:
        """Read, reconcile and, if needed, rewrite the configuration file."""
        try:
            text = self.config_file.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read {self.config_file}: {e}") from e

        try:
            data = parse_config_text(text)
        except ConfigError as e:
            raise ConfigError(f"{self.config_file}: {e}") from e

        config, substituted = Config.from_mapping(data)
        for name in substituted:
            logger.warning(f"'{name}' in {self.config_file} is missing or not a string. Using the default.")

        unknown = sorted(str(key) for key in data if key not in config.to_dict())
        if unknown:
            logger.warning(f"Ignoring unknown keys in {self.config_file}: {', '.join(unknown)}")

        if config.to_dict() != data:
            self.save(config)
            logger.debug(f"Reconciled configuration written back to {self.config_file}")

        logger.debug(f"Configuration loaded successfully from {self.config_file}")
        return config

    def save(self, config: Config) -> None:
        """Write a config to disk."""
        if not safe_file_write(self.config_file, dump_config(config), f"config file {self.config_file}"):
            raise ConfigError(f"Could not write {self.config_file}")

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call initialize() first.")
        return self._config

    def get_summary(self) -> Dict[str, str]:
        """Configuration values safe to print (the API key is masked)."""
        config = self.config
        masked_key = config.api_key[:4] + "..." if len(config.api_key) > 8 else "***"
        return {
            "config_file": str(self.config_file),
            "endpoint": config.endpoint,
            "api_key": masked_key,
            "model": config.model,
            "system_prompt": f"{len(config.system_prompt)} characters",
        }


def create_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Create and initialize a configuration manager.

    Exits with status 1 when a default config had to be written first.

    Args:
        config_dir: Custom configuration directory path

    Returns:
        Initialized ConfigManager instance
    """
    manager = ConfigManager(config_dir)
    if not manager.initialize():
        sys.exit(1)
    return manager
