"""Load and validate field-set and submitted-values files from YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from formcheck.config.models import FieldSetConfig

logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if data is None:
        raise ValueError(f"File is empty: {path}")
    return data


def load_field_set(path: str | Path) -> FieldSetConfig:
    """
    Load YAML file and validate into FieldSetConfig.
    Raises FileNotFoundError, yaml.YAMLError, or ValueError on invalid files.
    """
    path = Path(path)
    data = _read_yaml(path)

    try:
        config = FieldSetConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid field set: {e}") from e
    logger.debug("Loaded %d field rules from %s", len(config.fields), path)
    return config


def load_values(path: str | Path) -> dict[str, Any]:
    """
    Load submitted values (a YAML or JSON mapping of field name -> value).
    Raises FileNotFoundError, yaml.YAMLError, or ValueError when the top level is not a mapping.
    """
    path = Path(path)
    data = _read_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid values file: expected a mapping, got {type(data).__name__}")
    return {str(k): v for k, v in data.items()}
