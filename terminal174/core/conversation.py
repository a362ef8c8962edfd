"""Conversation transcript for terminal174."""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from ..constants import ROLE_SYSTEM, ROLE_USER, ROLE_ASSISTANT


class Role(Enum):
    """Message roles understood by the chat endpoint."""
    SYSTEM = ROLE_SYSTEM
    USER = ROLE_USER
    ASSISTANT = ROLE_ASSISTANT


@dataclass(frozen=True)
class Message:
    """A single role-tagged entry in the transcript."""
    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role.value, "content": self.content}


class Conversation:
    """Append-only transcript that starts with exactly one system message.

    The order of messages is the context the model sees, so nothing is ever
    removed or reordered once appended.
    """

    def __init__(self, system_prompt: str):
        self.id = str(uuid.uuid4())
        self._messages: List[Message] = [Message(Role.SYSTEM, system_prompt)]

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def last_message(self) -> Message:
        return self._messages[-1]

    def add_message(self, role: Role, content: str) -> Message:
        """Append a message; only user and assistant messages may follow the system prompt."""
        role = Role(role)
        if role is Role.SYSTEM:
            raise ValueError("A conversation holds exactly one system message.")
        message = Message(role, content)
        self._messages.append(message)
        return message

    def add_user(self, content: str) -> Message:
        return self.add_message(Role.USER, content)

    def add_assistant(self, content: str) -> Message:
        return self.add_message(Role.ASSISTANT, content)

    def awaiting_response(self) -> bool:
        """True when the newest message has not been answered by the model."""
        return self.last_message.role is Role.USER

    def to_payload(self) -> List[Dict[str, str]]:
        """The transcript in the wire format sent to the chat endpoint."""
        return [message.to_dict() for message in self._messages]
