"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, charcheck.toml only contains
overrides. An empty or missing file gives the stock form rules.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from charcheck.domain.rules import MAX_AGE_YEARS, MIN_AGE_YEARS, NAME_MAX_LENGTH, NAME_MIN_LENGTH


class RulesConfig(BaseModel):
    """[rules] section — numeric bounds of the form rules."""

    model_config = {"frozen": True}

    name_min_length: int = Field(default=NAME_MIN_LENGTH, ge=0)
    name_max_length: int = Field(default=NAME_MAX_LENGTH, ge=0)
    min_age_years: int = Field(default=MIN_AGE_YEARS, ge=0)
    max_age_years: int = Field(default=MAX_AGE_YEARS, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> RulesConfig:
        if self.name_min_length > self.name_max_length:
            msg = "name_min_length must not exceed name_max_length"
            raise ValueError(msg)
        if self.min_age_years > self.max_age_years:
            msg = "min_age_years must not exceed max_age_years"
            raise ValueError(msg)
        return self


class ProfanityConfig(BaseModel):
    """[profanity] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    wordlist: Path | None = None
