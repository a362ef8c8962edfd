"""Constants used throughout the terminal174 package."""

import os
import sys
from pathlib import Path

from colorama import Fore, Style

# Package information
PACKAGE_NAME = "terminal174"
APP_TITLE = "Terminal174 - AI-powered terminal"

# ANSI Color Codes (using colorama)
CLR_RESET = Style.RESET_ALL
CLR_RED = Fore.RED
CLR_BOLD_RED = Style.BRIGHT + Fore.RED
CLR_GREEN = Fore.GREEN
CLR_BOLD_GREEN = Style.BRIGHT + Fore.GREEN
CLR_YELLOW = Fore.YELLOW
CLR_BOLD_YELLOW = Style.BRIGHT + Fore.YELLOW
CLR_BLUE = Fore.BLUE
CLR_BOLD_BLUE = Style.BRIGHT + Fore.BLUE
CLR_MAGENTA = Fore.MAGENTA
CLR_BOLD_MAGENTA = Style.BRIGHT + Fore.MAGENTA
CLR_CYAN = Fore.CYAN
CLR_BOLD_CYAN = Style.BRIGHT + Fore.CYAN
CLR_WHITE = Fore.WHITE
CLR_BOLD_WHITE = Style.BRIGHT + Fore.WHITE

# Message roles accepted by the chat endpoint
ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

# Tags exchanged with the model
TALK_TAG = "talk"
RUN_COMMAND_TAG = "run_command"
COMMAND_RESULT_TAG = "command_result"
SYSTEM_INFORMATION_TAG = "system_information"

EXIT_COMMAND = "exit"

# Default configuration values
DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_API_KEY = "your-api-key-here"
DEFAULT_MODEL = "gpt-3.5-turbo"
CONFIG_FILE_NAME = "config.yaml"


def get_platform_config_root() -> Path:
    """Return the per-user configuration root for the running platform."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_default_config_dir() -> Path:
    """Return the application's configuration directory."""
    return get_platform_config_root() / PACKAGE_NAME
