"""Pydantic models for field-set files. Central contract for rule files and validation."""

from __future__ import annotations

from typing import Any, Union

from pydantic import AliasChoices, BaseModel, Field

from formcheck.domain.result import DEFAULT_SUCCESS_MESSAGE


class RuleEntry(BaseModel):
    """Structured rule as written in a field-set file."""

    type: str = Field(
        ...,
        validation_alias=AliasChoices("type", "kind"),
        description="Validator kind (email, radio, ...); `kind` is accepted too",
    )
    allowed_values: list[Any] | None = Field(default=None, description="Accepted values for radio fields")
    messages: dict[str, str] | None = Field(default=None, description="Optional required/format message overrides")


class FieldSetConfig(BaseModel):
    """Full field-set file: ordered field rules plus the success message."""

    success_message: str = Field(default=DEFAULT_SUCCESS_MESSAGE, description="Message when every field passes")
    # Bare kind strings and structured entries can be mixed; file order is kept
    fields: dict[str, Union[str, RuleEntry]] = Field(..., min_length=1, description="Field name -> rule")

    def field_set(self) -> dict[str, Any]:
        """Rules in the shape FieldValidator.validate accepts."""
        return {
            name: rule if isinstance(rule, str) else rule.model_dump(exclude_none=True)
            for name, rule in self.fields.items()
        }
