"""Aggregate outcome of one validation pass."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_SUCCESS_MESSAGE = "All fields are valid."


class ValidationResult(BaseModel):
    """Success flag plus one human-readable message for the whole field set."""

    success: bool
    message: str
    errors: list[str] = Field(default_factory=list, description="Per-field messages in field order")

    @classmethod
    def from_errors(cls, errors: list[str], success_message: str = DEFAULT_SUCCESS_MESSAGE) -> ValidationResult:
        if errors:
            return cls(success=False, message=" ".join(errors), errors=list(errors))
        return cls(success=True, message=success_message)

    def to_dict(self) -> dict[str, bool | str]:
        """The plain ``{"success", "message"}`` shape handed back to callers."""
        return {"success": self.success, "message": self.message}
