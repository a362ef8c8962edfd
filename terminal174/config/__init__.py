"""Configuration management for terminal174."""

from .manager import (
    Config,
    ConfigError,
    ConfigManager,
    create_config_manager,
    dump_config,
    parse_config_text,
)
from .templates import DEFAULT_SYSTEM_PROMPT

__all__ = [
    "Config",
    "ConfigError",
    "ConfigManager",
    "create_config_manager",
    "dump_config",
    "parse_config_text",
    "DEFAULT_SYSTEM_PROMPT",
]
