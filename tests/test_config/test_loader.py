"""Field-set and values files: valid YAML, malformed YAML, missing fields, invalid shapes."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from formcheck.config.loader import load_field_set, load_values
from formcheck.config.models import FieldSetConfig, RuleEntry
from formcheck.validation.field_validator import validate


def test_load_field_set_keeps_order_and_shapes(write_yaml) -> None:
    path = write_yaml(
        "rules.yaml",
        {
            "success_message": "Saved.",
            "fields": {
                "email": "email",
                "gender": {
                    "type": "radio",
                    "allowed_values": ["male", "female"],
                    "messages": {"format": "Pick a listed gender."},
                },
                "code": "digit_code",
            },
        },
    )
    config = load_field_set(path)
    assert config.success_message == "Saved."
    assert list(config.fields) == ["email", "gender", "code"]
    assert config.fields["email"] == "email"
    assert isinstance(config.fields["gender"], RuleEntry)
    assert config.field_set()["gender"] == {
        "type": "radio",
        "allowed_values": ["male", "female"],
        "messages": {"format": "Pick a listed gender."},
    }


def test_loaded_field_set_validates(write_yaml) -> None:
    path = write_yaml(
        "rules.yaml",
        {"fields": {"gender": {"type": "radio", "allowed_values": ["male"], "messages": {"format": "Pick one."}}}},
    )
    config = load_field_set(path)
    assert config.success_message == "All fields are valid."
    result = validate(config.field_set(), {"gender": "other"}, config.success_message)
    assert result.message == "Pick one."


def test_numeric_allowed_values_match_string_input(write_yaml) -> None:
    path = write_yaml("rules.yaml", {"fields": {"rating": {"type": "radio", "allowed_values": [1, 2, 3]}}})
    config = load_field_set(path)
    assert validate(config.field_set(), {"rating": "2"}).success is True


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_field_set(tmp_path / "nope.yaml")


def test_load_malformed_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text("fields: [\n  bar\n", encoding="utf-8")
    with pytest.raises((yaml.YAMLError, ValueError)):
        load_field_set(path)


def test_load_empty_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError, match="empty"):
        load_field_set(path)


def test_load_missing_fields_raises(write_yaml) -> None:
    path = write_yaml("rules.yaml", {"success_message": "Only a message"})
    with pytest.raises(ValueError, match="Invalid field set"):
        load_field_set(path)


def test_load_structured_rule_without_type_raises(write_yaml) -> None:
    path = write_yaml("rules.yaml", {"fields": {"x": {"allowed_values": ["a"]}}})
    with pytest.raises(ValueError, match="Invalid field set"):
        load_field_set(path)


def test_field_set_config_static_model() -> None:
    config = FieldSetConfig(fields={"email": "email", "pw": RuleEntry(type="password")})
    assert config.field_set() == {"email": "email", "pw": {"type": "password"}}


def test_load_values_mapping(write_yaml) -> None:
    path = write_yaml("values.yaml", {"email": "a@b.com", "age": 30})
    assert load_values(path) == {"email": "a@b.com", "age": 30}


def test_load_values_accepts_json(tmp_path: Path) -> None:
    path = tmp_path / "values.json"
    path.write_text('{"email": "a@b.com", "agree": "on"}', encoding="utf-8")
    assert load_values(path) == {"email": "a@b.com", "agree": "on"}


def test_load_values_rejects_non_mapping(write_yaml) -> None:
    path = write_yaml("values.yaml", ["a", "b"])
    with pytest.raises(ValueError, match="expected a mapping"):
        load_values(path)


def test_structured_rule_accepts_kind_key(write_yaml) -> None:
    path = write_yaml("rules.yaml", {"fields": {"g": {"kind": "radio", "allowed_values": ["a"]}}})
    config = load_field_set(path)
    assert config.field_set()["g"] == {"type": "radio", "allowed_values": ["a"]}
    assert validate(config.field_set(), {"g": "a"}).success is True
    assert validate(config.field_set(), {"g": "b"}).success is False
