"""Field rules: kind enum, rule models, and normalization of bare/structured rules."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class FieldKind(str, Enum):
    """Built-in validator kinds."""

    EMAIL = "email"
    NUMBER = "number"
    URL = "url"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    KEY = "key"
    TEXT = "text"
    TEXTAREA = "textarea"
    PHONE = "phone"
    DIGIT_CODE = "digit_code"
    PASSWORD = "password"


class RuleMessages(BaseModel):
    """Optional overrides for the default required/format messages."""

    model_config = ConfigDict(extra="ignore")

    required: str | None = None
    format: str | None = None


class Rule(BaseModel):
    """Normalized rule for one field.

    ``kind`` is kept as a plain string so unknown kinds survive normalization
    and are reported by the validator instead of rejected here.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    kind: str = Field(..., alias="type", description="Validator kind, e.g. email or radio")
    allowed_values: list[str] | None = Field(default=None, description="Accepted values for radio fields")
    messages: RuleMessages = Field(default_factory=RuleMessages)

    @field_validator("allowed_values", mode="before")
    @classmethod
    def _stringify_allowed_values(cls, v: Any) -> Any:
        # YAML turns `[1, 2]` into ints; submitted values are always compared as strings
        if isinstance(v, (list, tuple, set)):
            return [str(item) for item in v]
        return v

    @field_validator("messages", mode="before")
    @classmethod
    def _default_messages(cls, v: Any) -> Any:
        return {} if v is None else v

    def required_message(self, field_name: str) -> str:
        if self.messages.required is not None:
            return self.messages.required
        return f"The field {field_name} is required."

    def format_message(self, field_name: str) -> str:
        if self.messages.format is not None:
            return self.messages.format
        return f"The field {field_name} is not in the correct format."


# A field set entry as written by callers: "email", {"type": "radio", ...} or a Rule.
RuleSpec = Union[str, Mapping[str, Any], Rule]


def _invalid_rule() -> Rule:
    # an empty kind never matches a validator
    return Rule(kind="")


def normalize_rule(spec: RuleSpec) -> Rule:
    """Turn a bare kind string or a structured mapping into a Rule. Never raises."""
    if isinstance(spec, Rule):
        return spec
    if isinstance(spec, FieldKind):
        return Rule(kind=spec.value)
    if isinstance(spec, str):
        return Rule(kind=spec)
    if isinstance(spec, Mapping):
        # "kind" is accepted as an alias for "type"
        data = dict(spec)
        for key in ("type", "kind"):
            if isinstance(data.get(key), FieldKind):
                data[key] = data[key].value
        try:
            return Rule.model_validate(data)
        except ValidationError as e:
            logger.warning("Unusable field rule %r (%d errors)", spec, e.error_count())
            return _invalid_rule()
    logger.warning("Unusable field rule of type %s", type(spec).__name__)
    return _invalid_rule()
