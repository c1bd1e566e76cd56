"""Client for OpenAI-compatible and Azure chat completion endpoints."""

from __future__ import annotations

import json

import requests

from aicoder.config import Config, get_config
from aicoder.models import ChatRequest, Message, ResponseParseError, parse_chat_response

_session: requests.Session | None = None


class ChatCompletionError(Exception):
    """Raised when a chat completion request fails."""


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def _headers(config: Config) -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if config.type == "azure":
        headers["api-key"] = config.key
    else:
        headers["Authorization"] = "Bearer " + config.key
    return headers


def chat_completion(
    messages: list[Message],
    model: str | None = None,
    temperature: float = 0.1,
    config: Config | None = None,
) -> str:
    """Send the messages and return the content of the first reply choice."""
    if config is None:
        config = get_config()
    request = ChatRequest(
        messages=list(messages),
        model=model or config.model,
        temperature=temperature,
    )
    try:
        response = _get_session().post(
            config.endpoint,
            data=json.dumps(request.to_dict()).encode("utf-8"),
            headers=_headers(config),
        )
    except requests.RequestException as exc:
        raise ChatCompletionError(str(exc)) from exc

    with response:
        if response.status_code != 200:
            raise ChatCompletionError(f"Error: {response.status_code} {response.reason}")
        try:
            return parse_chat_response(response.content)
        except ResponseParseError as exc:
            raise ChatCompletionError(str(exc)) from exc


def dispose_client() -> None:
    """Close pooled connections held by the shared HTTP session."""
    global _session
    if _session is not None:
        _session.close()
        _session = None