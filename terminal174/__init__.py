"""
terminal174 - an AI-powered terminal.

Relays what the user types to a chat-completion model, shows the model's
<talk> segments, runs its <run_command> segments in a shell and feeds the
output back until the model stops asking for commands.
"""

__version__ = "0.1.0"

# Main API imports
from .core.application import Terminal174, create_application
from .core.chain import CommandChain, ChainOutcome, create_command_chain
from .core.conversation import Conversation, Message, Role
from .config.manager import Config, ConfigError, ConfigManager, create_config_manager

__all__ = [
    "Terminal174",
    "create_application",
    "CommandChain",
    "ChainOutcome",
    "create_command_chain",
    "Conversation",
    "Message",
    "Role",
    "Config",
    "ConfigError",
    "ConfigManager",
    "create_config_manager",
    "__version__",
]
