"""Utility functions and helpers for terminal174."""

from .logging import logger
from .helpers import (
    get_os_family,
    get_current_context,
    format_system_information,
    ensure_directory_exists,
    safe_file_write
)

__all__ = [
    "logger",
    "get_os_family",
    "get_current_context",
    "format_system_information",
    "ensure_directory_exists",
    "safe_file_write",
]
