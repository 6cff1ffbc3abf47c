"""Field set validation: read each field's value, apply its rule, collect one message per field."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from formcheck.domain.result import DEFAULT_SUCCESS_MESSAGE, ValidationResult
from formcheck.domain.rules import Rule, RuleSpec, normalize_rule
from formcheck.domain.validators import DEFAULT_CHECKS, Check, check_value

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """Missing, None, or zero-length. The string "0" is a real value."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def _as_text(value: Any) -> str | None:
    """Submitted value as text, or None when it has no single text form (lists, dicts)."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return None


class FieldValidator:
    """Validates a field set against submitted values. Holds only the kind -> check table."""

    def __init__(self, checks: Mapping[str, Check] | None = None) -> None:
        self._checks: dict[str, Check] = dict(DEFAULT_CHECKS)
        if checks:
            self._checks.update(checks)

    @property
    def kinds(self) -> frozenset[str]:
        return frozenset(self._checks)

    def validate(
        self,
        field_set: Mapping[str, RuleSpec],
        request_values: Mapping[str, Any],
        success_message: str = DEFAULT_SUCCESS_MESSAGE,
    ) -> ValidationResult:
        """
        Check every field in field_set order; first failure per field wins.
        Never raises for bad values or bad rules: both become messages in the result.
        """
        errors: list[str] = []
        for field_name, spec in field_set.items():
            error = self._validate_field(field_name, normalize_rule(spec), request_values.get(field_name))
            if error is not None:
                logger.debug("Field %s failed: %s", field_name, error)
                errors.append(error)

        result = ValidationResult.from_errors(errors, success_message)
        logger.debug("Validated %d fields, %d failed", len(field_set), len(errors))
        return result

    def _validate_field(self, field_name: str, rule: Rule, value: Any) -> str | None:
        if is_empty(value):
            return rule.required_message(field_name)

        if rule.kind not in self._checks:
            return f"Invalid validation type for field {field_name}."

        text = _as_text(value)
        if text is None:
            return rule.format_message(field_name)

        try:
            ok = check_value(text, rule, self._checks)
        except Exception:
            # custom checks may raise; that counts as a format failure
            logger.exception("Check for kind %r raised on field %s", rule.kind, field_name)
            ok = False
        if not ok:
            return rule.format_message(field_name)
        return None


_default_validator = FieldValidator()


def validate(
    field_set: Mapping[str, RuleSpec],
    request_values: Mapping[str, Any],
    success_message: str = DEFAULT_SUCCESS_MESSAGE,
) -> ValidationResult:
    """Validate with the built-in kinds only."""
    return _default_validator.validate(field_set, request_values, success_message)
