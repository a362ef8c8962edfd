"""LLM client for chat-completion API communication in terminal174."""

import json
from typing import Any, Dict, List, Optional, Sequence

import requests

from ..utils.logging import logger


class LLMError(Exception):
    """Base class for failures while talking to the chat endpoint."""


class NetworkError(LLMError):
    """The request could not be delivered or the endpoint returned an error status."""


class SerializationError(LLMError):
    """The request could not be encoded or the response could not be decoded."""


class EmptyResponseError(LLMError):
    """The endpoint answered with no choices."""


class LLMClient:
    """Sends the conversation to an OpenAI-compatible chat completions endpoint."""

    def __init__(self, endpoint: str, api_key: str, model: str,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """Initialize LLM client.

        Args:
            endpoint: Chat completions URL
            api_key: Bearer token sent with every request
            model: Model identifier passed through to the endpoint
            timeout: Request timeout in seconds; None waits indefinitely
            session: HTTP session to reuse (a new one is created if omitted)
        """
        self.endpoint = endpoint
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(self, messages: Sequence[Dict[str, str]]) -> str:
        """Encode the request body.

        Raises:
            SerializationError: If the messages cannot be encoded as JSON
        """
        try:
            return json.dumps({"model": self.model, "messages": list(messages)})
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to encode chat request: {e}") from e

    def chat(self, messages: Sequence[Dict[str, str]]) -> str:
        """Send the full transcript and return the first choice's content.

        Args:
            messages: Wire-format messages, oldest first

        Returns:
            Content of ``choices[0].message.content``

        Raises:
            NetworkError: On transport failure or a non-success HTTP status
            SerializationError: If the request or response body is malformed
            EmptyResponseError: If the response contains no choices
        """
        payload = self.build_payload(messages)
        logger.debug(f"Sending {len(messages)} messages to {self.endpoint} (model: {self.model})")

        try:
            response = self.session.post(
                self.endpoint,
                headers=self._build_headers(),
                data=payload.encode("utf-8"),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"LLM API request failed: {e}") from e

        try:
            response_data = response.json()
        except ValueError as e:
            raise SerializationError(f"Failed to parse LLM response as JSON: {e}") from e

        return extract_response_content(response_data)


def extract_response_content(response_data: Any) -> str:
    """Pull ``choices[0].message.content`` out of a decoded response body."""
    if not isinstance(response_data, dict) or "choices" not in response_data:
        raise SerializationError("LLM response has no 'choices' field.")

    choices: List[Any] = response_data["choices"]
    if not isinstance(choices, list):
        raise SerializationError("LLM response 'choices' is not a list.")
    if not choices:
        raise EmptyResponseError("LLM response contained no choices.")

    first = choices[0]
    try:
        content = first["message"]["content"]
    except (KeyError, TypeError) as e:
        raise SerializationError(f"LLM response choice is malformed: {e}") from e

    if not isinstance(content, str):
        raise SerializationError("LLM response content is not a string.")
    return content


def create_llm_client(config, timeout: Optional[float] = None) -> LLMClient:
    """Create an LLM client from a loaded Config."""
    return LLMClient(config.endpoint, config.api_key, config.model, timeout=timeout)
