import json
import sys

import pytest

from aicoder.config import (
    Config,
    ConfigError,
    find_config_path,
    get_config,
    load_config,
    reset_config,
)

VALID = {
    "endpoint": "https://api.example.com/v1/chat",
    "key": "placeholder",
    "model": "gpt-test",
    "code_system_prompt": "code prompt",
    "refactor_system_prompt": "refactor prompt",
}


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


def _write(directory, data):
    path = directory / "aicoder.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_config_defaults_type_to_openai(tmp_path):
    config = load_config(_write(tmp_path, VALID))
    assert config.type == "openai"
    assert config.endpoint == VALID["endpoint"]
    assert config.key == VALID["key"]
    assert config.model == VALID["model"]
    assert config.code_system_prompt == VALID["code_system_prompt"]
    assert config.refactor_system_prompt == VALID["refactor_system_prompt"]


def test_load_config_keeps_azure_type(tmp_path):
    config = load_config(_write(tmp_path, {**VALID, "type": "azure"}))
    assert config.type == "azure"


@pytest.mark.parametrize("missing", sorted(VALID))
def test_load_config_missing_field(tmp_path, missing):
    data = {k: v for k, v in VALID.items() if k != missing}
    with pytest.raises(ConfigError, match=missing):
        load_config(_write(tmp_path, data))


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.json")


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "aicoder.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_wrong_field_type(tmp_path):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, {**VALID, "model": 4}))


def test_validate_returns_self_and_fills_type():
    config = Config(**VALID)
    assert config.validate() is config
    assert config.type == "openai"


def test_find_config_path_prefers_working_directory(tmp_path, monkeypatch):
    expected = _write(tmp_path, VALID)
    monkeypatch.chdir(tmp_path)
    assert find_config_path() == expected


def test_find_config_path_falls_back_to_program_directory(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    bindir = tmp_path / "bin"
    bindir.mkdir()
    expected = _write(bindir, VALID)
    monkeypatch.chdir(work)
    monkeypatch.setattr(sys, "argv", [str(bindir / "aicoder")])
    assert find_config_path().resolve() == expected.resolve()


def test_find_config_path_not_found(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "bin" / "aicoder")])
    with pytest.raises(ConfigError):
        find_config_path()


def test_get_config_is_cached_until_reset(tmp_path, monkeypatch):
    _write(tmp_path, VALID)
    monkeypatch.chdir(tmp_path)
    first = get_config()
    assert get_config() is first
    reset_config()
    second = get_config()
    assert second is not first
    assert second == first