"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest
from txt2asc.config import CONFIG_ENV_VAR, DEFAULT_ENCODINGS, ConverterConfig, load_config
from txt2asc.core.frame import Direction
from txt2asc.exceptions import ConfigError


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def test_defaults_without_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    
    config = load_config()
    
    assert config.preview_lines == 5
    assert config.encodings == DEFAULT_ENCODINGS
    assert config.output_dir is None


def test_load_explicit_path(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.json", {
        "preview_lines": 3,
        "encodings": ["utf-8"],
        "output_dir": "out",
        "tokens": {"direction": {"Receive": "Rx"}},
    })
    
    config = load_config(path)
    
    assert config.preview_lines == 3
    assert config.encodings == ("utf-8",)
    assert config.output_dir == tmp_path / "out"
    assert config.tokens.direction_of("Receive") is Direction.RX


def test_load_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path / "env.json", {"preview_lines": 1})
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    
    assert load_config().preview_lines == 1


def test_missing_env_file_uses_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.json"))
    
    assert load_config() == ConverterConfig()


def test_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    
    with pytest.raises(ConfigError, match="Malformed"):
        load_config(path)


def test_non_object_json(tmp_path: Path) -> None:
    path = _write(tmp_path / "list.json", [1, 2])
    
    with pytest.raises(ConfigError, match="JSON object"):
        load_config(path)


@pytest.mark.parametrize(
    "data,match",
    [
        ({"preview_lines": -1}, "preview_lines"),
        ({"preview_lines": "many"}, "Invalid"),
        ({"encodings": []}, "encodings"),
        ({"encodings": ["no-such-codec"]}, "Unknown encoding"),
        ({"tokens": {"frame_format": {"Data": "x"}}}, "Invalid"),
    ],
)
def test_invalid_values(tmp_path: Path, data: dict, match: str) -> None:
    path = _write(tmp_path / "config.json", data)
    
    with pytest.raises(ConfigError, match=match):
        load_config(path)
