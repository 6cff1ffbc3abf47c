"""Field-set file loading and validation."""

from formcheck.config.models import (
    FieldSetConfig,
    RuleEntry,
)
from formcheck.config.loader import load_field_set, load_values

__all__ = [
    "FieldSetConfig",
    "RuleEntry",
    "load_field_set",
    "load_values",
]
