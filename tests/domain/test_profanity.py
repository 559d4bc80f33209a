"""Tests for the forbidden-term matcher."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from charcheck.domain.profanity import ForbiddenTermMatcher


class TestFromTerms:
    def test_exact_match(self) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["darn"])
        assert matcher.contains_forbidden("darn")

    def test_case_insensitive(self) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["darn"])
        assert matcher.contains_forbidden("DaRn")

    def test_whole_word_inside_sentence(self) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["darn"])
        assert matcher.contains_forbidden("oh darn it")

    @pytest.mark.parametrize("value", ["darnell", "undarn", "xdarnx"])
    def test_substring_of_larger_word_is_not_a_match(self, value: str) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["darn"])
        assert not matcher.contains_forbidden(value)

    def test_punctuation_is_a_boundary(self) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["darn"])
        assert matcher.contains_forbidden("Mc-Darn")

    def test_multi_word_term(self) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["blast it"])
        assert matcher.contains_forbidden("Blast It")
        assert not matcher.contains_forbidden("blast")

    def test_terms_are_literal(self) -> None:
        """Regex metacharacters in terms do not act as patterns."""
        matcher = ForbiddenTermMatcher.from_terms(["a.c"])
        assert matcher.contains_forbidden("a.c")
        assert not matcher.contains_forbidden("abc")

    def test_blank_terms_skipped(self) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["", "  ", "heck"])
        assert matcher.term_count == 1
        assert not matcher.contains_forbidden("hello world")

    def test_accepts_any_iterable(self) -> None:
        matcher = ForbiddenTermMatcher.from_terms(term for term in ("darn", "heck"))
        assert matcher.term_count == 2
        assert matcher.contains_forbidden("heck")

    def test_empty_value_never_matches(self) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["darn"])
        assert not matcher.contains_forbidden("")
        assert not matcher.contains_forbidden(None)


class TestSymbolTerms:
    @pytest.mark.parametrize("term", ["a$$", "@ss", "sh*t!", "$crap"])
    def test_exact_match(self, term: str) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["a$$", "@ss", "sh*t!", "$crap"])
        assert matcher.contains_forbidden(term)

    @pytest.mark.parametrize("value", ["SH*T!", "A$$", "total a$$ move", "the @ss"])
    def test_case_and_surrounding_words(self, value: str) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["a$$", "@ss", "sh*t!"])
        assert matcher.contains_forbidden(value)

    @pytest.mark.parametrize("value", ["ba$$", "@ssert", "xsh*t!"])
    def test_glued_to_word_characters_is_not_a_match(self, value: str) -> None:
        matcher = ForbiddenTermMatcher.from_terms(["a$$", "@ss", "sh*t!"])
        assert not matcher.contains_forbidden(value)


class TestDegradedMatcher:
    def test_missing_terms_rejects_nothing(self) -> None:
        matcher = ForbiddenTermMatcher.from_terms(None)
        assert matcher.is_permissive
        assert not matcher.contains_forbidden("darn")

    def test_missing_terms_logs_warning(self) -> None:
        with capture_logs() as logs:
            ForbiddenTermMatcher.from_terms(None)
        assert logs == [
            {
                "event": "profanity_filter_disabled",
                "reason": "term_list_unavailable",
                "log_level": "warning",
            }
        ]

    def test_empty_terms_logs_warning(self) -> None:
        with capture_logs() as logs:
            matcher = ForbiddenTermMatcher.from_terms(["", " "])
        assert matcher.is_permissive
        assert logs[0]["reason"] == "term_list_empty"
        assert logs[0]["log_level"] == "warning"

    def test_compiled_logs_term_count(self) -> None:
        with capture_logs() as logs:
            ForbiddenTermMatcher.from_terms(["darn", "heck"])
        assert logs == [
            {"event": "profanity_filter_compiled", "term_count": 2, "log_level": "debug"}
        ]

    def test_permissive_is_silent(self) -> None:
        with capture_logs() as logs:
            matcher = ForbiddenTermMatcher.permissive()
        assert matcher.is_permissive
        assert logs == []


    def test_repr(self) -> None:
        assert repr(ForbiddenTermMatcher.from_terms(["darn"])) == (
            "ForbiddenTermMatcher(term_count=1)"
        )
