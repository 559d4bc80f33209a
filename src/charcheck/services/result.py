"""ValidationResult — the validator's output contract.

INVARIANT: Validation failures are data, never exceptions.
The UI layer consumes :meth:`ValidationResult.to_payload`, which is
``{"isValid": True}`` or ``{"isValid": False, "field": ..., "message": ...}``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """Outcome of validating one field or a whole character.

    Attributes:
        is_valid: Whether every evaluated rule passed.
        field: Name of the failing field; None when valid.
        message: Error code of the first failing rule; None when valid.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    is_valid: bool = Field(alias="isValid")
    field: str | None = None
    message: str | None = None

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, field: str, code: str) -> ValidationResult:
        return cls(is_valid=False, field=str(field), message=str(code))

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the UI-facing key names, omitting empty keys."""
        return self.model_dump(by_alias=True, exclude_none=True)
