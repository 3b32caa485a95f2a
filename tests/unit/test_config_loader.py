from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from chasecomb.config import ConfigLoadError, EnumerationConfig, load_config


def test_load_json_config_with_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"n": 15, "k": 4}), encoding="utf-8")

    config = load_config(config_path)

    assert config.n == 15
    assert config.k == 4
    assert config.limit is None
    assert config.output_format == "text"
    assert config.count_only is False
    assert config.log_level == "WARNING"
    assert config.resolve_elements() == list(range(15))


def test_load_yaml_config(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "elements: [red, green, blue]\n" "k: 2\n" "limit: 2\n" "output_format: json\n",
        encoding="utf-8",
    )

    config = load_config(config_path)
    assert config.resolve_elements() == ["red", "green", "blue"]
    assert config.k == 2
    assert config.limit == 2
    assert config.output_format == "json"


def test_overrides_take_precedence(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"n": 6, "k": 2}), encoding="utf-8")

    config = load_config(config_path, overrides={"k": 3, "count_only": True})
    assert config.k == 3
    assert config.count_only is True


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_invalid_config_value_raises_validation_error(tmp_path):
    config_path = tmp_path / "invalid.json"
    config_path.write_text(json.dumps({"n": 3, "k": -1}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_config(config_path)


def test_unsupported_extension_raises(tmp_path):
    config_path = tmp_path / "config.txt"
    config_path.write_text("k=1", encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="Unsupported config format"):
        load_config(config_path)


def test_non_object_root_raises(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="Config root"):
        load_config(config_path)


def test_malformed_json_raises(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="Invalid JSON"):
        load_config(config_path)


def test_exactly_one_element_source_is_required():
    with pytest.raises(ValidationError, match="Exactly one"):
        EnumerationConfig(k=1)
    with pytest.raises(ValidationError, match="Exactly one"):
        EnumerationConfig(n=3, elements=[1, 2, 3], k=1)


def test_k_cannot_exceed_distinct_elements():
    with pytest.raises(ValidationError, match="greater than the number of elements"):
        EnumerationConfig(elements=["a", "a", "b"], k=3)


def test_unknown_fields_are_forbidden():
    with pytest.raises(ValidationError):
        EnumerationConfig(n=3, k=1, order="lexicographic")


def test_element_source_override_replaces_file_source(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"elements": ["a", "b", "c"], "k": 1}), encoding="utf-8")

    config = load_config(config_path, overrides={"n": 4})
    assert config.elements is None
    assert config.resolve_elements() == [0, 1, 2, 3]

    config = load_config(config_path, overrides={"elements": ["x", "y"]})
    assert config.resolve_elements() == ["x", "y"]
