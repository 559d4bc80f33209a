"""Declarative rule table for the character-creation form.

Each field maps to an ordered RuleSet of ``Rule(check, code)`` pairs.
Rules are evaluated in order and the first failing check wins.
Field order in the table is the order :meth:`validate_character` walks.

INVARIANT: The table is built once and never mutated. It is exposed as a
read-only mapping of tuples, so concurrent reads are safe without locking.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType

from charcheck.domain.dates import is_too_old, is_too_young, is_valid_calendar_date, today_utc
from charcheck.domain.profanity import ForbiddenTermMatcher
from charcheck.domain.types import ErrorCode, FieldName

Check = Callable[[str | None], bool]
Clock = Callable[[], date]


@dataclass(frozen=True)
class Rule:
    """A single validation rule. ``check`` returns True when the value passes."""

    check: Check
    code: ErrorCode


RuleSet = tuple[Rule, ...]
RuleTable = Mapping[str, RuleSet]

# --- Default bounds ---

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 16
MIN_AGE_YEARS = 8
MAX_AGE_YEARS = 100


def is_filled(value: str | None) -> bool:
    """Empty strings and missing values count as forgotten."""
    return bool(value)


def _min_length(limit: int) -> Check:
    return lambda value: len(value or "") >= limit


def _max_length(limit: int) -> Check:
    return lambda value: len(value or "") <= limit


def _clean(matcher: ForbiddenTermMatcher) -> Check:
    return lambda value: not matcher.contains_forbidden(value)


def _name_rules(
    matcher: ForbiddenTermMatcher,
    too_short: ErrorCode,
    too_long: ErrorCode,
    min_length: int,
    max_length: int,
) -> RuleSet:
    return (
        Rule(is_filled, ErrorCode.FORGOTTEN_FIELD),
        Rule(_min_length(min_length), too_short),
        Rule(_max_length(max_length), too_long),
        Rule(_clean(matcher), ErrorCode.PROFANITY),
    )


def _date_rules(min_age_years: int, max_age_years: int, clock: Clock) -> RuleSet:
    # invalid_date must precede the age rules: both age checks fail
    # closed on unparseable input.
    return (
        Rule(is_filled, ErrorCode.FORGOTTEN_FIELD),
        Rule(is_valid_calendar_date, ErrorCode.INVALID_DATE),
        Rule(
            lambda value: not is_too_young(value, min_age_years, today=clock()),
            ErrorCode.AGE_TOO_YOUNG,
        ),
        Rule(
            lambda value: not is_too_old(value, max_age_years, today=clock()),
            ErrorCode.AGE_TOO_OLD,
        ),
    )


def build_rule_table(
    matcher: ForbiddenTermMatcher,
    *,
    name_min_length: int = NAME_MIN_LENGTH,
    name_max_length: int = NAME_MAX_LENGTH,
    min_age_years: int = MIN_AGE_YEARS,
    max_age_years: int = MAX_AGE_YEARS,
    clock: Clock = today_utc,
) -> RuleTable:
    """Build the immutable field -> RuleSet table.

    Args:
        matcher: Forbidden-term matcher shared by the free-text fields.
        name_min_length: Minimum first/last name length (inclusive).
        name_max_length: Maximum first/last name length (inclusive).
        min_age_years: Youngest accepted age in whole years.
        max_age_years: Oldest accepted age in whole years.
        clock: Returns today's UTC date; injected for deterministic tests.
    """
    table: dict[str, RuleSet] = {
        FieldName.FIRSTNAME: _name_rules(
            matcher,
            ErrorCode.FIRSTNAME_TOO_SHORT,
            ErrorCode.FIRSTNAME_TOO_LONG,
            name_min_length,
            name_max_length,
        ),
        FieldName.LASTNAME: _name_rules(
            matcher,
            ErrorCode.LASTNAME_TOO_SHORT,
            ErrorCode.LASTNAME_TOO_LONG,
            name_min_length,
            name_max_length,
        ),
        FieldName.NATIONALITY: (
            Rule(is_filled, ErrorCode.FORGOTTEN_FIELD),
            Rule(_clean(matcher), ErrorCode.PROFANITY),
        ),
        FieldName.GENDER: (Rule(is_filled, ErrorCode.FORGOTTEN_FIELD),),
        FieldName.DATE: _date_rules(min_age_years, max_age_years, clock),
    }
    return MappingProxyType(table)


def first_failure(rules: RuleSet, value: str | None) -> ErrorCode | None:
    """Return the code of the first rule *value* fails, or None."""
    for rule in rules:
        if not rule.check(value):
            return rule.code
    return None
