from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from kvconfig.config import DEFAULT_CONFIG, ReaderConfig
from kvconfig.config.loader import ConfigLoadError, load_config


def test_load_json_config_with_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"max_size": 4096}), encoding="utf-8")

    config = load_config(config_path)

    assert config.max_size == 4096
    assert config.line_separator == "\n"
    assert config.key_separator == "="


def test_load_yaml_config(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        'line_separator: ";"\n' 'key_separator: ":"\n' "max_size: 100\n",
        encoding="utf-8",
    )

    config = load_config(config_path)
    assert config.line_separator == ";"
    assert config.key_separator == ":"
    assert config.max_size == 100


def test_empty_yaml_gives_defaults(tmp_path):
    config_path = tmp_path / "config.yml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path) == DEFAULT_CONFIG


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_invalid_config_value_raises_validation_error(tmp_path):
    config_path = tmp_path / "invalid.json"
    config_path.write_text(json.dumps({"max_size": 0}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_config(config_path)


def test_unknown_key_raises_validation_error(tmp_path):
    config_path = tmp_path / "extra.json"
    config_path.write_text(json.dumps({"comment_prefix": "#"}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_config(config_path)


def test_unsupported_extension_raises(tmp_path):
    config_path = tmp_path / "config.txt"
    config_path.write_text("max_size=10", encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="Unsupported config format"):
        load_config(config_path)


def test_non_object_root_raises(tmp_path):
    config_path = tmp_path / "list.json"
    config_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="must be a JSON/YAML object"):
        load_config(config_path)


def test_malformed_json_raises(tmp_path):
    config_path = tmp_path / "broken.json"
    config_path.write_text("{", encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="Invalid JSON"):
        load_config(config_path)


@pytest.mark.parametrize(
    "fields",
    [
        {"line_separator": ""},
        {"key_separator": "=="},
        {"line_separator": "=", "key_separator": "="},
    ],
)
def test_separator_constraints(fields):
    with pytest.raises(ValidationError):
        ReaderConfig(**fields)


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.max_size = 10
