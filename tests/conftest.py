"""Pytest fixtures: sample field sets, submitted values, rule files."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def signup_fields() -> dict:
    """Field set covering a bare rule, a radio rule and custom messages."""
    return {
        "email": "email",
        "gender": {"type": "radio", "allowed_values": ["male", "female"]},
        "password": {
            "type": "password",
            "messages": {
                "required": "Choose a password.",
                "format": "Password is too weak.",
            },
        },
        "code": "digit_code",
    }


@pytest.fixture
def valid_signup_values() -> dict[str, str]:
    return {
        "email": "alice@example.com",
        "gender": "female",
        "password": "Abcdefg1",
        "code": "123456",
    }


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Write data as YAML into tmp_path and return the file path."""

    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
