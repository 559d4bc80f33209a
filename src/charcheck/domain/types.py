"""Field names and error codes for the character-creation form.

The string values are part of the output contract consumed by the UI
layer, which maps each code to a localized message.
"""

from __future__ import annotations

from enum import StrEnum


class FieldName(StrEnum):
    """Form fields, in validation order."""

    FIRSTNAME = "firstname"
    LASTNAME = "lastname"
    NATIONALITY = "nationality"
    GENDER = "gender"
    DATE = "date"


class ErrorCode(StrEnum):
    """Literal error codes reported for the first failing rule."""

    FORGOTTEN_FIELD = "forgotten_field"
    FIRSTNAME_TOO_SHORT = "firstname_too_short"
    FIRSTNAME_TOO_LONG = "firstname_too_long"
    LASTNAME_TOO_SHORT = "lastname_too_short"
    LASTNAME_TOO_LONG = "lastname_too_long"
    PROFANITY = "profanity"
    INVALID_DATE = "invalid_date"
    AGE_TOO_YOUNG = "age_too_young"
    AGE_TOO_OLD = "age_too_old"


FIELD_ORDER: tuple[FieldName, ...] = tuple(FieldName)
