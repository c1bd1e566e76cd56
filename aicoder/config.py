"""Loading and validating the aicoder.json settings file."""

from __future__ import annotations

import json
import sys
import threading
from dataclasses import dataclass, fields
from pathlib import Path

CONFIG_FILENAME = "aicoder.json"
DEFAULT_TYPE = "openai"


class ConfigError(Exception):
    """Raised when the configuration cannot be found, read or validated."""


@dataclass
class Config:
    endpoint: str = ""
    key: str = ""
    model: str = ""
    type: str = ""
    code_system_prompt: str = ""
    refactor_system_prompt: str = ""

    def validate(self) -> "Config":
        """Fill in the default service type and check required fields."""
        self.type = self.type or DEFAULT_TYPE
        missing = [f.name for f in fields(self) if not getattr(self, f.name)]
        if missing:
            raise ConfigError(
                f"Missing required configuration fields: {', '.join(missing)} in {CONFIG_FILENAME}"
            )
        return self


def find_config_path() -> Path:
    """Locate aicoder.json in the working directory, then next to the program."""
    candidates = [Path.cwd() / CONFIG_FILENAME]
    if sys.argv and sys.argv[0]:
        candidates.append(Path(sys.argv[0]).resolve().parent / CONFIG_FILENAME)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise ConfigError(f"Failed to load configuration: {CONFIG_FILENAME} not found")


def load_config(path: str | Path) -> Config:
    """Read, parse and validate a configuration file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8")) or {}
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Failed to load configuration: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Failed to load configuration: top level must be a JSON object")
    values = {}
    for f in fields(Config):
        value = data.get(f.name)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"Failed to load configuration: field {f.name!r} must be a string")
        if value is not None:
            values[f.name] = value
    return Config(**values).validate()


_lock = threading.Lock()
_instance: Config | None = None


def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    global _instance
    with _lock:
        if _instance is None:
            _instance = load_config(find_config_path())
        return _instance


def reset_config() -> None:
    """Forget the cached configuration so the next call reloads it."""
    global _instance
    with _lock:
        _instance = None