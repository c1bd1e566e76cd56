"""Data shapes exchanged with the chat completion API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator

JSON_OBJECT_FORMAT = "json_object"


class ResponseParseError(ValueError):
    """Raised when a reply payload does not have the expected shape."""


@dataclass
class Message:
    role: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class ChatRequest:
    messages: list[Message]
    model: str
    temperature: float
    response_format: str | None = JSON_OBJECT_FORMAT

    def to_dict(self) -> dict[str, Any]:
        fmt = None if self.response_format is None else {"type": self.response_format}
        return {
            "messages": [m.to_dict() for m in self.messages],
            "model": self.model,
            "temperature": self.temperature,
            "response_format": fmt,
        }


@dataclass
class CodeFile:
    filepath: str = ""
    code: str = ""


@dataclass
class CodeFiles:
    files: list[CodeFile] = field(default_factory=list)

    def __iter__(self) -> Iterator[CodeFile]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)


@dataclass
class SanitizerResponse:
    readability_score: int = 0
    readability_reason: str = ""
    cyclomatic_score: int = 0
    cyclomatic_reason: str = ""
    improved_code: str = ""


def _object(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ResponseParseError(f"{what} must be a JSON object")
    return value


def _load(payload: str | bytes | bytearray) -> dict[str, Any]:
    try:
        return _object(json.loads(payload), "payload")
    except (ValueError, UnicodeDecodeError) as exc:
        if isinstance(exc, ResponseParseError):
            raise
        raise ResponseParseError(f"invalid JSON: {exc}") from exc


def _get(obj: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = obj.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ResponseParseError(f"field {key!r} must be {kind.__name__}")
    return value


def parse_chat_response(payload: str | bytes | bytearray) -> str:
    """Return the content of the first choice in a chat completion reply."""
    choices = _get(_load(payload), "choices", list, [])
    if not choices:
        raise ResponseParseError("response contains no choices")
    message = _object(_object(choices[0], "choice").get("message"), "message")
    return _get(message, "content", str, "")


def parse_code_files(payload: str | bytes | bytearray) -> CodeFiles:
    """Parse a ``{"files": [{"filepath": ..., "code": ...}]}`` document."""
    entries = (_object(item, "file entry") for item in _get(_load(payload), "files", list, []))
    return CodeFiles(
        files=[CodeFile(_get(e, "filepath", str, ""), _get(e, "code", str, "")) for e in entries]
    )


def parse_sanitizer_response(payload: str | bytes | bytearray) -> SanitizerResponse:
    """Parse the refactoring evaluation document."""
    data = _load(payload)
    return SanitizerResponse(
        readability_score=_get(data, "readability_score", int, 0),
        readability_reason=_get(data, "readability_reason", str, ""),
        cyclomatic_score=_get(data, "cyclomatic_score", int, 0),
        cyclomatic_reason=_get(data, "cyclomatic_reason", str, ""),
        improved_code=_get(data, "improved_code", str, ""),
    )