"""Helper utility functions for terminal174."""

import os
import platform
from pathlib import Path

from ..constants import SYSTEM_INFORMATION_TAG
from ..utils.logging import logger


def get_os_family() -> str:
    """Return the operating system family reported to the model."""
    system = platform.system()
    if system == "Windows":
        return "Windows"
    if system == "Darwin":
        return "macOS"
    return "Linux"


def get_current_context() -> dict:
    """Get the environment details attached to each user turn."""
    try:
        working_directory = os.getcwd()
    except OSError:
        working_directory = "unknown"
    return {
        "operating_system": get_os_family(),
        "shell": os.environ.get("SHELL", "unknown"),
        "working_directory": working_directory,
    }


def format_system_information() -> str:
    """Render the current environment as a <system_information> block."""
    context = get_current_context()
    return (
        f"<{SYSTEM_INFORMATION_TAG}>"
        f"Operating System: {context['operating_system']}\n"
        f"Shell: {context['shell']}\n"
        f"Working Directory: {context['working_directory']}"
        f"</{SYSTEM_INFORMATION_TAG}>"
    )


def ensure_directory_exists(directory: Path) -> None:
    """Ensure a directory exists, creating it if necessary."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {directory}")
    except Exception as e:
        logger.error(f"Failed to create directory {directory}: {e}")
        raise


def safe_file_write(file_path: Path, content: str, description: str = None) -> bool:
    """Safely write content to a file with error handling."""
    desc = description or f"file {file_path}"
    try:
        file_path.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {desc}")
        return True
    except Exception as e:
        logger.error(f"Failed to write {desc}: {e}")
        return False
