"""Logging utilities for terminal174."""

import sys
import datetime
from typing import Dict, NamedTuple

from ..constants import (
    CLR_RESET, CLR_CYAN, CLR_BOLD_CYAN, CLR_MAGENTA, CLR_BOLD_MAGENTA,
    CLR_YELLOW, CLR_BOLD_YELLOW, CLR_WHITE, CLR_BOLD_WHITE, CLR_RED, CLR_BOLD_RED
)


class LevelStyle(NamedTuple):
    header: str
    content: str
    to_stderr: bool = False


LEVELS: Dict[str, LevelStyle] = {
    "System": LevelStyle(CLR_CYAN, CLR_BOLD_CYAN),
    "Model": LevelStyle(CLR_MAGENTA, CLR_BOLD_MAGENTA),
    "Command": LevelStyle(CLR_YELLOW, CLR_BOLD_YELLOW),
    "Error": LevelStyle(CLR_RED, CLR_BOLD_RED, to_stderr=True),
    "Warning": LevelStyle(CLR_YELLOW, CLR_BOLD_YELLOW, to_stderr=True),
    "Debug": LevelStyle(CLR_WHITE, CLR_BOLD_WHITE),
}


class Logger:
    """Console logger tagging each record with a timestamp and a colored level."""

    def __init__(self, debug_enabled: bool = False):
        self.debug_enabled = debug_enabled

    def set_debug(self, enabled: bool) -> None:
        """Enable or disable debug logging."""
        self.debug_enabled = enabled

    def log_message(self, level: str, message: str) -> None:
        """Write one record; continuation lines are indented under the first."""
        if level == "Debug" and not self.debug_enabled:
            return

        style = LEVELS[level]
        stream = sys.stderr if style.to_stderr else sys.stdout

        prefix = f"[{datetime.datetime.now():%Y-%m-%d %H:%M:%S}] [{level}]: "
        lines = message.splitlines() or [""]
        rendered = [f"{style.header}{prefix}{CLR_RESET}{style.content}{lines[0]}{CLR_RESET}"]
        rendered.extend(f"{' ' * len(prefix)}{style.content}{line}{CLR_RESET}" for line in lines[1:])

        print("\n".join(rendered), file=stream, flush=True)

    def system(self, message: str) -> None:
        self.log_message("System", message)

    def model(self, message: str) -> None:
        self.log_message("Model", message)

    def command(self, message: str) -> None:
        self.log_message("Command", message)

    def error(self, message: str) -> None:
        self.log_message("Error", message)

    def warning(self, message: str) -> None:
        self.log_message("Warning", message)

    def debug(self, message: str) -> None:
        self.log_message("Debug", message)


# Global logger instance; the application switches debug on from the CLI flag
logger = Logger()
