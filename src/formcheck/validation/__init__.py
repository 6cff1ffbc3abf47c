"""Field set validation."""

from formcheck.validation.field_validator import FieldValidator, is_empty, validate

__all__ = ["FieldValidator", "is_empty", "validate"]
