"""Validate submitted form fields against per-field type rules."""

from formcheck.domain.result import DEFAULT_SUCCESS_MESSAGE, ValidationResult
from formcheck.domain.rules import FieldKind, Rule, RuleMessages, normalize_rule
from formcheck.domain.validators import validate_password
from formcheck.validation.field_validator import FieldValidator, validate

__all__ = [
    "DEFAULT_SUCCESS_MESSAGE",
    "FieldKind",
    "FieldValidator",
    "Rule",
    "RuleMessages",
    "ValidationResult",
    "normalize_rule",
    "validate",
    "validate_password",
]
