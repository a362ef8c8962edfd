"""LLM integration for terminal174."""

from .client import (
    LLMClient,
    LLMError,
    NetworkError,
    SerializationError,
    EmptyResponseError,
    create_llm_client,
    extract_response_content
)
from .parsers import (
    Directive,
    iter_talk_segments,
    iter_run_commands,
    parse_directives
)

__all__ = [
    "LLMClient",
    "LLMError",
    "NetworkError",
    "SerializationError",
    "EmptyResponseError",
    "create_llm_client",
    "extract_response_content",
    "Directive",
    "iter_talk_segments",
    "iter_run_commands",
    "parse_directives",
]
