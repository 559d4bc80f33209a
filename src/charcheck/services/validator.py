"""CharacterValidator — fail-fast evaluation of the form rule table.

The validator is an explicitly constructed value. Callers build one at
startup and inject it where needed. Construction never fails because of
the forbidden-term source: an unavailable list degrades to a permissive
matcher and logs a WARNING.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import structlog

from charcheck.domain.dates import today_utc
from charcheck.domain.profanity import ForbiddenTermMatcher
from charcheck.domain.rules import Clock, RuleTable, build_rule_table, first_failure
from charcheck.errors import WordListError
from charcheck.services.result import ValidationResult

if TYPE_CHECKING:
    from charcheck.config.models import ProfanityConfig, RulesConfig
    from charcheck.config.settings import CharcheckSettings

logger = structlog.get_logger(__name__)


class CharacterValidator:
    """Validate character-creation fields against an immutable rule table.

    Usage::

        validator = CharacterValidator.from_terms(["badword"])
        result = validator.validate_character({"firstname": "Ada", ...})
        if not result.is_valid:
            show_error(result.field, result.message)
    """

    def __init__(
        self,
        matcher: ForbiddenTermMatcher,
        rules: RulesConfig | None = None,
        clock: Clock = today_utc,
    ) -> None:
        self._matcher = matcher
        if rules is None:
            self._table = build_rule_table(matcher, clock=clock)
        else:
            self._table = build_rule_table(
                matcher,
                name_min_length=rules.name_min_length,
                name_max_length=rules.name_max_length,
                min_age_years=rules.min_age_years,
                max_age_years=rules.max_age_years,
                clock=clock,
            )

    @classmethod
    def from_terms(
        cls,
        terms: Iterable[str] | None,
        rules: RulesConfig | None = None,
        clock: Clock = today_utc,
    ) -> CharacterValidator:
        """Build a validator whose matcher is compiled from *terms*."""
        return cls(ForbiddenTermMatcher.from_terms(terms), rules=rules, clock=clock)

    @property
    def matcher(self) -> ForbiddenTermMatcher:
        return self._matcher

    @property
    def rule_table(self) -> RuleTable:
        return self._table

    @property
    def fields(self) -> tuple[str, ...]:
        """Field names in validation order."""
        return tuple(str(name) for name in self._table)

    def validate_field(self, field_name: str, value: str | None) -> ValidationResult:
        """Run one field's rules in order and stop at the first failure.

        Fields without a rule set pass: unknown form fields are accepted
        as-is rather than treated as errors.
        """
        rules = self._table.get(field_name)
        if rules is None:
            return ValidationResult.valid()

        code = first_failure(rules, value)
        if code is None:
            return ValidationResult.valid()
        logger.debug("field_invalid", field=str(field_name), code=str(code))
        return ValidationResult.invalid(field_name, code)

    def validate_character(self, record: Mapping[str, str | None]) -> ValidationResult:
        """Validate a whole form, reporting the first failing field.

        Fields are visited in rule-table order, not the record's key
        order. Missing keys are validated as empty values.
        """
        for field_name in self._table:
            result = self.validate_field(field_name, record.get(field_name))
            if not result.is_valid:
                return result
        return ValidationResult.valid()


def _load_matcher(profanity: ProfanityConfig) -> ForbiddenTermMatcher:
    if not profanity.enabled:
        logger.info("profanity_filter_disabled", reason="disabled_by_config")
        return ForbiddenTermMatcher.permissive()
    if profanity.wordlist is None:
        return ForbiddenTermMatcher.from_terms(None)

    from charcheck.infrastructure.wordlist import load_forbidden_terms

    try:
        terms = load_forbidden_terms(profanity.wordlist)
    except WordListError as exc:
        logger.warning(
            "profanity_filter_disabled",
            reason="word_list_unreadable",
            path=str(exc.path),
            error=exc.reason,
        )
        return ForbiddenTermMatcher.permissive()
    return ForbiddenTermMatcher.from_terms(terms)


def create_validator(
    settings: CharcheckSettings,
    clock: Clock = today_utc,
) -> CharacterValidator:
    """Build a validator from settings, loading the configured word list.

    A missing or unreadable word list never blocks construction.
    """
    matcher = _load_matcher(settings.profanity)
    return CharacterValidator(matcher, rules=settings.rules, clock=clock)
