"""Pytest configuration and shared fixtures."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pytest

from terminal174.commands import CommandResult
from terminal174.config import Config, dump_config
from terminal174.core.conversation import Conversation


class ScriptedLLMClient:
    """Stands in for LLMClient, answering from a fixed list of replies.

    A reply that is an exception instance is raised instead of returned.
    """

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls: List[List[Dict[str, str]]] = []

    def chat(self, messages):
        self.calls.append([dict(m) for m in messages])
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class RecordingExecutor:
    """Stands in for CommandExecutor, recording commands instead of running them."""

    def __init__(self, outputs=None, fail_on=()):
        self.outputs = outputs or {}
        self.fail_on = set(fail_on)
        self.commands: List[str] = []

    def execute(self, command):
        self.commands.append(command)
        if command in self.fail_on:
            raise FileNotFoundError(2, "No such file or directory", "sh")
        return CommandResult(command, stdout_lines=[self.outputs.get(command, f"ran {command}")], exit_code=0)


@pytest.fixture
def conversation() -> Conversation:
    return Conversation("You live inside a terminal.")


@pytest.fixture
def make_llm():
    return ScriptedLLMClient


@pytest.fixture
def make_executor():
    return RecordingExecutor


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A config directory holding a valid configuration."""
    d = tmp_path / "terminal174"
    d.mkdir()
    config = Config(endpoint="http://localhost:9999/v1/chat/completions",
                    api_key="sk-test-key",
                    model="test-model",
                    system_prompt="You live inside a terminal.")
    (d / "config.yaml").write_text(dump_config(config), encoding="utf-8")
    return d
