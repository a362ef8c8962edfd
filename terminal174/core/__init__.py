"""Core application logic for terminal174."""

from .application import Terminal174, create_application
from .chain import ChainOutcome, CommandChain, create_command_chain
from .conversation import Conversation, Message, Role

__all__ = [
    "Terminal174",
    "create_application",
    "ChainOutcome",
    "CommandChain",
    "create_command_chain",
    "Conversation",
    "Message",
    "Role",
]
