"""Service layer — the validator and its result contract."""

from charcheck.services.result import ValidationResult
from charcheck.services.validator import CharacterValidator, create_validator

__all__ = ["CharacterValidator", "ValidationResult", "create_validator"]
