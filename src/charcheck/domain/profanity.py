"""Forbidden-term matching for free-text fields.

All forbidden terms are compiled into one case-insensitive pattern. A
term matches only when it is not glued to a word character on either
side, so ``darn`` does not match ``darnell`` while terms that begin or
end with symbols (``a$$``, ``@ss``) still match on their own.

INVARIANT: Building a matcher never fails validation setup. A missing
or empty term list produces a matcher that rejects nothing, and a
WARNING is logged because profanity filtering is then disabled.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import structlog

logger = structlog.get_logger(__name__)


def compile_terms(terms: Iterable[str]) -> re.Pattern[str]:
    """Compile *terms* into one literal, case-insensitive alternation."""
    alternation = "|".join(re.escape(term) for term in terms)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)


class ForbiddenTermMatcher:
    """Immutable wrapper around the compiled forbidden-term pattern."""

    __slots__ = ("_pattern", "_term_count")

    def __init__(self, pattern: re.Pattern[str] | None, term_count: int = 0) -> None:
        self._pattern = pattern
        self._term_count = term_count

    @classmethod
    def from_terms(cls, terms: Iterable[str] | None) -> ForbiddenTermMatcher:
        """Compile *terms* into a matcher, degrading to permissive if unavailable.

        Terms are escaped and matched literally, in the order given.
        Blank terms are skipped.
        """
        if terms is None:
            logger.warning("profanity_filter_disabled", reason="term_list_unavailable")
            return cls.permissive()

        cleaned = [term.strip() for term in terms if term and term.strip()]
        if not cleaned:
            logger.warning("profanity_filter_disabled", reason="term_list_empty")
            return cls.permissive()

        logger.debug("profanity_filter_compiled", term_count=len(cleaned))
        return cls(compile_terms(cleaned), len(cleaned))

    @classmethod
    def permissive(cls) -> ForbiddenTermMatcher:
        """A matcher that never flags anything."""
        return cls(None)

    @property
    def is_permissive(self) -> bool:
        return self._pattern is None

    @property
    def term_count(self) -> int:
        return self._term_count

    def contains_forbidden(self, value: str | None) -> bool:
        """True if *value* contains a forbidden term as a whole word."""
        if self._pattern is None or not value:
            return False
        return self._pattern.search(value) is not None

    def __repr__(self) -> str:
        return f"ForbiddenTermMatcher(term_count={self._term_count})"
